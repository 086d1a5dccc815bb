"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the application to the outside world (file storage, SMTP, console)
by implementing the interfaces defined in the domain layer.
"""
