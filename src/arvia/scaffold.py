"""Generate the file layout of a new Arvia project."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from arvia.config import ProjectConfig
from arvia.errors import ConfigError
from arvia.paths import CONFIG_FILE, INDEX_FILE

DEFAULT_PROJECT_NAME = "my-arvia-app"

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <link rel="stylesheet" href="assets/css/style.css">
</head>
<body>
    <div class="container">
        <header>
            <h1>Welcome to Arvia</h1>
            <p>{name}</p>
        </header>

        <main>
            <div class="card">
                <h2>Getting Started</h2>
                <p>Edit <code>src/index.html</code> and save: the page reloads by itself.</p>
                <button onclick="showMessage()">Click Me!</button>
                <p id="message"></p>
            </div>
        </main>
    </div>

    <script src="assets/js/app.js"></script>
</body>
</html>
"""

STYLE_TEMPLATE = """* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

body {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    line-height: 1.6;
    color: #333;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    min-height: 100vh;
}

.container {
    max-width: 1200px;
    margin: 0 auto;
    padding: 2rem;
}

header {
    text-align: center;
    margin-bottom: 3rem;
    color: white;
}

.card {
    background: rgba(255, 255, 255, 0.95);
    border-radius: 15px;
    padding: 2rem;
    text-align: center;
}

button {
    background: linear-gradient(45deg, #667eea, #764ba2);
    color: white;
    border: none;
    padding: 0.75rem 2rem;
    border-radius: 25px;
    cursor: pointer;
}

code {
    background: #f4f4f4;
    padding: 0.2rem 0.5rem;
    border-radius: 4px;
}

#message {
    margin-top: 1rem;
    font-weight: bold;
    color: #667eea;
}
"""

APP_JS_TEMPLATE = """console.log('Arvia app loaded');

function showMessage() {
    document.getElementById('message').textContent = 'Hello from Arvia!';
}
"""


@dataclass
class ScaffoldReport:
    """Files and directories created by one scaffolding run.

    Attributes:
        root: The new project directory
        directories_created: Folders created, parents included
        files_written: Files written, descriptor included
    """

    root: Path
    directories_created: list[Path] = field(default_factory=list)
    files_written: list[Path] = field(default_factory=list)

    def tree_lines(self) -> Iterable[str]:
        """Yield a tree-style listing of the written files."""
        yield f"{self.root.name}/"
        entries = sorted(str(p.relative_to(self.root)) for p in self.files_written)
        for i, entry in enumerate(entries):
            branch = "└──" if i == len(entries) - 1 else "├──"
            yield f"   {branch} {entry}"


def _mkdir(path: Path, report: ScaffoldReport) -> None:
    if not path.exists():
        path.mkdir(parents=True)
        report.directories_created.append(path)


def _write(path: Path, content: str, report: ScaffoldReport) -> None:
    path.write_text(content, encoding="utf-8")
    report.files_written.append(path)


def create_project(parent: Path, name: str = DEFAULT_PROJECT_NAME, *, force: bool = False) -> ScaffoldReport:
    """Create a new project directory with a starter page and arvia.json.

    Args:
        parent: Directory the project is created in
        name: Project name, also the new directory's name
        force: Overwrite an existing project

    Returns:
        ScaffoldReport listing what was created

    Raises:
        ConfigError: If ``parent/name`` already holds an arvia.json and
            ``force`` is not set
    """
    root = (Path(parent) / name).resolve()
    config = ProjectConfig(name=name)
    descriptor = root / CONFIG_FILE
    if descriptor.exists() and not force:
        raise ConfigError(f"{descriptor} already exists (use --force to overwrite)", path=str(descriptor))

    report = ScaffoldReport(root=root)
    source = root / config.source_dir
    assets = root / config.assets_dir
    for directory in (source, assets / "css", assets / "js", assets / "img"):
        _mkdir(directory, report)

    _write(descriptor, config.to_json() + "\n", report)
    _write(source / INDEX_FILE, INDEX_TEMPLATE.format(name=name), report)
    _write(assets / "css" / "style.css", STYLE_TEMPLATE, report)
    _write(assets / "js" / "app.js", APP_JS_TEMPLATE, report)
    return report


__all__ = ["DEFAULT_PROJECT_NAME", "ScaffoldReport", "create_project"]
