"""Vectors, matrices, transforms, colours and numeric helpers."""