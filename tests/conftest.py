import sys
from pathlib import Path

import pytest
import torch

# Добавляем корень репозитория в PYTHONPATH до начала тестов
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def generator() -> torch.Generator:
    """Детерминированный генератор для измерений."""
    return torch.Generator().manual_seed(1234)
