"""
Services package for HevySpotter.

Contains business logic services for:
- Derived analytics (activity heatmap, monthly volume)
- LLM coaching (analysis and routine generation over OpenAI)
- Coach personas
"""
