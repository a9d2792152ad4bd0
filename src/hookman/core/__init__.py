"""Core hook-generation pipeline for hookman."""
