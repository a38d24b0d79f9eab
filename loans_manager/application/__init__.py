"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (validate, then submit through the CommandBus)
- services/  → Read-side facades (LoansService)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces, ValidationResult, CommandBus

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
