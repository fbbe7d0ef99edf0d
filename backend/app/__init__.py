"""
Employee Directory Backend: Application Package
================================================

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │  Services (composition, mutations)  │  ← resolver, employee/seed services
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │    Entity Store (Persistence)       │  ← one async session per call
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
