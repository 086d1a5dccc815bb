"""Core Application Layer: the application handlers.

Connects the domain layer with the infrastructure layer through interfaces.
Contains the public and private application handlers and the command handler.
"""
