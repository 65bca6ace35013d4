"""Style specification input."""

from stylegen.spec.models import StyleSpec
from stylegen.spec.parser import load_spec, parse_spec_text

__all__ = ["StyleSpec", "load_spec", "parse_spec_text"]
