"""
VocabTrainer — Entry point
===========================
Load settings, configure logging and launch the application.
"""

import sys
import os

# Ensure project root is on the path so absolute imports work when running
# directly with `python main.py`.
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.config import get_settings
from core.logging_config import setup_logging
from ui.app import VocabTrainerApp


def main() -> None:
    settings = get_settings()
    setup_logging(settings)
    app = VocabTrainerApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
