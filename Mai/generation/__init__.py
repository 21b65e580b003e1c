from Mai.generation.gemini import GeminiClient
from Mai.generation.generator import HPFGenerator

__all__ = ["GeminiClient", "HPFGenerator"]
