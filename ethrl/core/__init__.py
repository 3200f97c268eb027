"""Logging, file access and frame timing."""