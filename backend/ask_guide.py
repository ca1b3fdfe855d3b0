#!/usr/bin/env python3
"""
Ask the PilgrimPath guide a question straight from the terminal.

Talks to Gemini directly with the public guide persona; the HTTP backend is
not involved. Requires GEMINI_API_KEY (in the environment or backend/.env).

    python ask_guide.py "Which ghat is least crowded this evening?"
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from config import ConfigError
from gemini.direct import get_ai_response


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print('Usage: python ask_guide.py "<question>"', file=sys.stderr)
        return 2

    load_dotenv()
    logging.basicConfig(level=logging.WARNING)

    try:
        answer = asyncio.run(get_ai_response(" ".join(argv)))
    except ConfigError as exc:
        print(f"CRITICAL: {exc}", file=sys.stderr)
        return 1

    print(answer)
    return 0


if __name__ == '__main__':
    sys.exit(main())
