"""procapi SDK - the validator algebra procedures are declared with.

### Type Validation (`procapi.sdk.validator`)
Composable validator nodes and their translation into OpenAPI schema objects.
"""
