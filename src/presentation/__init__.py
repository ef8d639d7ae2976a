"""
Presentation Layer - HTTP surface.

Translates requests into use case calls and maps results and domain
errors to HTTP responses. Contains no business rules.
"""
