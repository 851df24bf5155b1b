"""
Shared utilities package.

Cross-cutting concerns used by the core use cases and the adapters:
- Configuration management
- Structured logging
- Tracing
- Dependency Injection wiring
"""
