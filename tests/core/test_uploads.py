from pathlib import Path

from core.utils.uploads import resolve_uploads_dir, resolve_within


class TestResolveUploadsDir:
    def test_defaults_to_uploads_images(self, monkeypatch, tmp_path) -> None:
        monkeypatch.delenv("UPLOADS_DIR", raising=False)
        monkeypatch.chdir(tmp_path)

        assert resolve_uploads_dir() == (tmp_path / "uploads" / "images").resolve()

    def test_honours_environment(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("UPLOADS_DIR", str(tmp_path / "media"))

        assert resolve_uploads_dir() == (tmp_path / "media").resolve()


class TestResolveWithin:
    def test_resolves_nested_file(self, tmp_path: Path) -> None:
        root = tmp_path.resolve()

        assert resolve_within(root, "furniture_products/a.jpg") == root / "furniture_products" / "a.jpg"

    def test_strips_leading_slash(self, tmp_path: Path) -> None:
        root = tmp_path.resolve()

        assert resolve_within(root, "/a.jpg") == root / "a.jpg"

    def test_rejects_parent_traversal(self, tmp_path: Path) -> None:
        root = (tmp_path / "uploads").resolve()

        assert resolve_within(root, "../secret.txt") is None
        assert resolve_within(root, "furniture_products/../../secret.txt") is None

    def test_rejects_root_itself(self, tmp_path: Path) -> None:
        root = tmp_path.resolve()

        assert resolve_within(root, "") is None
        assert resolve_within(root, ".") is None
