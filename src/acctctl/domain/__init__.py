"""Domain layer — pure currency arithmetic and outcome codes.

Domain modules import nothing from infrastructure, services, or commands.
"""
