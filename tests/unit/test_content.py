"""Tests for request resolution and reload script injection."""

from __future__ import annotations

from pathlib import Path

from arvia.config import ProjectConfig
from arvia.server.content import (
    Origin,
    inject_reload_script,
    reload_script,
    resolve_request,
)


class TestInjectReloadScript:
    """Tests for inject_reload_script."""

    def test_injected_before_closing_body(self) -> None:
        html = b"<html><body>Hi</body></html>"
        out = inject_reload_script(html, 8080)

        script = reload_script(8080).encode()
        assert out == b"<html><body>Hi" + script + b"</body></html>"

    def test_only_last_body_tag_used(self) -> None:
        """A '</body>' inside page text stays untouched."""
        html = b"<html><body><pre>&lt;/body&gt; </body> literal</pre><div></div></body></html>"
        out = inject_reload_script(html, 8080)

        idx = html.rfind(b"</body>")
        script = reload_script(8080).encode()
        assert out[:idx] == html[:idx]
        assert out[idx : idx + len(script)] == script
        assert out[idx + len(script) :] == html[idx:]

    def test_no_body_tag_unchanged(self) -> None:
        html = b"<html><p>fragment</p></html>"
        assert inject_reload_script(html, 8080) == html

    def test_non_utf8_bytes_preserved(self) -> None:
        html = b"<body>caf\xe9</body>"
        out = inject_reload_script(html, 8080)
        assert out.startswith(b"<body>caf\xe9")
        assert out.endswith(b"</script></body>")

    def test_script_targets_port_and_endpoint(self) -> None:
        script = reload_script(3000, "/livereload")
        assert ":3000/livereload" in script
        assert "new WebSocket(" in script
        assert "event.data === 'reload'" in script
        assert "location.reload()" in script


class TestResolveRequest:
    """Tests for resolve_request."""

    def test_root_maps_to_index(self, project: ProjectConfig) -> None:
        assert resolve_request("/", project) == resolve_request("/index.html", project)
        assert resolve_request("", project) == resolve_request("/index.html", project)

    def test_source_file(self, project: ProjectConfig) -> None:
        resolved = resolve_request("/js/main.js", project)
        assert resolved is not None
        assert resolved.origin is Origin.SOURCE
        assert resolved.path == project.source_dir / "js" / "main.js"
        assert not resolved.is_html

    def test_html_flagged(self, project: ProjectConfig) -> None:
        resolved = resolve_request("/about.html", project)
        assert resolved is not None
        assert resolved.is_html

    def test_assets_prefix(self, project: ProjectConfig) -> None:
        """/assets/... resolves against the assets tree, not the source tree."""
        resolved = resolve_request("/assets/css/style.css", project)
        assert resolved is not None
        assert resolved.origin is Origin.ASSETS
        assert resolved.path == project.assets_dir / "css" / "style.css"

    def test_source_shadows_assets(self, project: ProjectConfig) -> None:
        shadow = project.source_dir / "assets" / "css"
        shadow.mkdir(parents=True)
        (shadow / "style.css").write_text("/* source copy */")

        resolved = resolve_request("/assets/css/style.css", project)
        assert resolved is not None
        assert resolved.origin is Origin.SOURCE

    def test_html_in_assets_not_flagged(self, project: ProjectConfig) -> None:
        (project.assets_dir / "embed.html").write_text("<body></body>")
        resolved = resolve_request("/assets/embed.html", project)
        assert resolved is not None
        assert resolved.origin is Origin.ASSETS
        assert not resolved.is_html

    def test_directory_serves_index(self, project: ProjectConfig) -> None:
        resolved = resolve_request("/blog/", project)
        assert resolved is not None
        assert resolved.path == project.source_dir / "blog" / "index.html"

    def test_directory_without_index_not_found(self, project: ProjectConfig) -> None:
        assert resolve_request("/js", project) is None

    def test_missing_file(self, project: ProjectConfig) -> None:
        assert resolve_request("/nope.html", project) is None

    def test_parent_traversal_rejected(self, project: ProjectConfig, project_dir: Path) -> None:
        """Paths escaping the source or assets tree are not found."""
        (project_dir / "secret.txt").write_text("top secret")
        assert resolve_request("/../secret.txt", project) is None
        assert resolve_request("/assets/../../secret.txt", project) is None
        assert resolve_request("/js/../../arvia.json", project) is None

    def test_symlinked_directory_index_outside_root_rejected(
        self, project: ProjectConfig, tmp_path: Path
    ) -> None:
        """A directory index linking out of the tree is not served."""
        secret = tmp_path / "secret.txt"
        secret.write_text("top secret")
        docs = project.source_dir / "docs"
        docs.mkdir()
        (docs / "index.html").symlink_to(secret)
        (project.source_dir / "direct.html").symlink_to(secret)

        assert resolve_request("/direct.html", project) is None
        assert resolve_request("/docs/", project) is None
        assert resolve_request("/docs", project) is None

    def test_symlinked_directory_index_inside_root_served(
        self, project: ProjectConfig
    ) -> None:
        docs = project.source_dir / "docs"
        docs.mkdir()
        (docs / "index.html").symlink_to(project.source_dir / "about.html")

        resolved = resolve_request("/docs/", project)
        assert resolved is not None
        assert resolved.path == project.source_dir / "about.html"

    def test_traversal_within_root_allowed(self, project: ProjectConfig) -> None:
        resolved = resolve_request("/js/../about.html", project)
        assert resolved is not None
        assert resolved.path == project.source_dir / "about.html"
