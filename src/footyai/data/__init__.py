"""
Data layer for FootyAI.

Includes:
- Request/response models and the Gemini output schema (`schema`)
"""
