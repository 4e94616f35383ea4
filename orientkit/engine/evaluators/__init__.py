"""Registered sign evaluators; each module registers itself on import."""
