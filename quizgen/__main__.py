"""Run the quizgen CLI with ``python -m quizgen``."""

from .cli import main

if __name__ == "__main__":
    main()
