"""Configuração do pytest para o emissor de tokens Grafana Cloud."""

import sys
from pathlib import Path

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
for path in (src_path, project_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
