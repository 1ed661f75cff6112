from __future__ import annotations
import argparse, io, logging, sys
from pathlib import Path

from .common import setup_logging
from jdcodec import FixtureConfig, FixtureError
from jdwf.api import atomic_write_text
from jdwf.cases import DEFAULT_CASES, FLOAT_CASES
from jdwf.driver import generate

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Fixtures DataInput (Rust) depuis les encodages DataOutput")
    p.add_argument("--out", default=None, help="Fichier de sortie (défaut: stdout)")
    p.add_argument("--with-floats", action="store_true", help="Ajoute read_float / read_double")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    cases = DEFAULT_CASES + (FLOAT_CASES if args.with_floats else ())
    buf = io.StringIO()
    try:
        generate(cases, buf, FixtureConfig.from_env())
    except (FixtureError, ValueError) as e:
        logging.error("generation aborted: %s", e)
        return 1

    if args.out:
        try:
            atomic_write_text(args.out, buf.getvalue())
        except OSError as e:
            logging.error("cannot write %s: %s", args.out, e)
            return 1
        logging.info("→ OK %s", args.out)
    else:
        sys.stdout.write(buf.getvalue())
    return 0

if __name__ == "__main__":
    sys.exit(main())
