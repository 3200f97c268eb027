"""Actors, components, scenes, events, factories and resources."""