"""
Pytest configuration for FusionKit docs tests
"""

import sys
from pathlib import Path

# Add src to Python path for all tests
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import pytest

from fusionkit_docs.config import reset_settings
from fusionkit_docs.indexing import clear_index_cache


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Isolate tests from FUSIONKIT_* env vars and the index cache"""
    for name in (
        "FUSIONKIT_DOCS_PATH",
        "FUSIONKIT_DOCS_CACHE",
        "FUSIONKIT_FK_COMMAND",
        "FUSIONKIT_LOG_LEVEL",
        "FUSIONKIT_OPEN_BROWSER",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    clear_index_cache()
    yield
    reset_settings()
    clear_index_cache()


def write_docs(root: Path, files: dict) -> Path:
    """Write {relative path: markdown} under root and return root"""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


OVERVIEW_MD = """# What is FusionKit?
FusionKit is a comprehensive framework for building modular applications.

## Key Benefits
- Modular architecture
- **Easy** integration
* Scalable solutions

## Quick Start Guide
Follow these steps to get started with FusionKit quickly.

## Deployment Scenarios

### Standalone Applications
Run independently with full control.
No shell required.

### Microfrontends in a Shell
Inherit shared services from parent shell.
"""

CORE_MD = """# Fusion Kit Core
Core functionality for FusionKit applications.
"""

CLI_MD = """# Fusion Kit CLI
Command-line interface for FusionKit development.

## Installation
Install it globally:

```bash
npm install -g @inform-appshell/fusion-kit-cli@latest
```

## Commands
- `fk create mfe -n my-app`
- `fk create shell -n my-shell`

## Usage Example
```bash
fk create mfe -n my-app -f react
```
"""

MIGRATION_MD = """# Migration from v1.0 to v2.0
This guide covers migrating from version 1.0 to 2.0.

## Breaking Changes
- API endpoint changes
- Configuration format updates

## Migration Steps
- Update dependencies
- Run migration script
- Test application

## Code Changes
```javascript
// Before:
oldApi.method();

// After:
newApi.method();
```
"""

REACT_EXAMPLE_MD = """# React Setup Example
```jsx
import React from "react";
import { FusionKit } from "fusion-kit-core";

function App() {
  return <div>Hello FusionKit</div>;
}
```
"""


@pytest.fixture
def docs_dir(tmp_path):
    """A documentation tree with one file per category"""
    return write_docs(
        tmp_path / "docs",
        {
            "overview.md": OVERVIEW_MD,
            "packages/fusion-kit-core.md": CORE_MD,
            "packages/fusion-kit-cli.md": CLI_MD,
            "migration/v1-to-v2.md": MIGRATION_MD,
            "examples/react-setup.md": REACT_EXAMPLE_MD,
        },
    )
