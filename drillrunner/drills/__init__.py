"""Drills on basics, error handling and iteration."""