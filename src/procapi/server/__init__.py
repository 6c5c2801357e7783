"""procapi server - procedure registry, OpenAPI generation and interfaces.

This package contains:
- Procedure definitions and the router registry
- The OpenAPI generation service (route validation, parameter classification, assembly)
- Core configuration loading
- External interfaces (CLI)
"""
