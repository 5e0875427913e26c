"""
Domain layer module.

Core types for spec-to-code verification. Independent of infrastructure
concerns and depends only on protocols.

Key components:
- models.py: VerificationResult and VerificationReport (Pydantic)
- exceptions.py: VerificationError hierarchy
- protocols.py: VerificationProvider interface
"""
