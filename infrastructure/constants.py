from pathlib import Path

# Repo-root conventional directories/files (overrideable via converter.yaml / CLI)
CONFIG_DIR = Path("configs")
CONVERTER_FILE = CONFIG_DIR / "converter.yaml"

OUTPUT_DIR = Path("outputs")
