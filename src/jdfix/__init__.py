r"""jdfix — unified API

Import one namespace:

    import jdfix as jf
    jf.encode_text("A\u03bc\x00\u121f")       # b"\x00\x08A\xce\xbc\xc0\x80\xe1\x88\x9f"
    jf.generate(jf.DEFAULT_CASES, sys.stdout)

Or detailed modules:

    from jdfix import codec, wf
"""

__version__ = "0.1.0"

import jdcodec as codec
import jdwf as wf

from jdcodec import (
    FixtureConfig, FixtureError, LengthOverflowError, EncodingDefectError,
    encode_signed_byte, encode_signed_short, encode_unsigned_short,
    encode_signed_int, encode_signed_long, encode_float, encode_double,
    encode_text, DataOutput,
)
from jdwf import DEFAULT_CASES, FLOAT_CASES, TestCase, generate, render_case

__all__ = [
    # sub-namespaces
    "codec", "wf",
    # convenience
    "FixtureConfig", "FixtureError", "LengthOverflowError", "EncodingDefectError",
    "encode_signed_byte", "encode_signed_short", "encode_unsigned_short",
    "encode_signed_int", "encode_signed_long", "encode_float", "encode_double",
    "encode_text", "DataOutput",
    "DEFAULT_CASES", "FLOAT_CASES", "TestCase", "generate", "render_case",
    "__version__",
]
