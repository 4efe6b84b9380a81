# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
#
# conftest.py — окружение для тестов:
#   • src/ в sys.path, чтобы `import sss` работал без установки пакета
#   • чистые переменные окружения SSS_* для предсказуемой политики

from __future__ import annotations

import os
import sys
from pathlib import Path

# ───────────────────────────── 1. PYTHONPATH и env ────────────────────────────
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # чтобы import видел src/

for _name in ("SSS_PRIME_STRATEGY", "SSS_TEXT_FORMAT", "SSS_LOG_LEVEL"):
    os.environ.pop(_name, None)
