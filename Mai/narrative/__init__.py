from Mai.narrative.compiler import build_prompt_payload, build_user_prompt, compile_narrative
from Mai.narrative.shape import enforce_shape

__all__ = ["build_prompt_payload", "build_user_prompt", "compile_narrative", "enforce_shape"]
