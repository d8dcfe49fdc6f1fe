"""Domain layer — units, temperature value object, conversion rules.

This layer depends only on the stdlib.
It must never import from services, config, output, or commands.
"""
