"""
Response sanitization: mask spec compilation, tree walk and the BlackLab mask table.
"""

from .bls_masks import bls_mask_spec, sanitize_bls_response, strip_dir
from .mask_spec import CompiledMask, compile_mask_spec
from .sanitizer import identity_transform, sanitize_response

__all__ = [
    "CompiledMask",
    "bls_mask_spec",
    "compile_mask_spec",
    "identity_transform",
    "sanitize_bls_response",
    "sanitize_response",
    "strip_dir",
]
