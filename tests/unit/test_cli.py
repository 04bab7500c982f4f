"""
Tests for the command-line entry point.
"""

from modresolve.__main__ import main


class TestCli:
    def test_resolves_bare_name(self, make_tree, capsys):
        root = make_tree("lib/mod.js")
        code = main(["main.js", "mod", "--root", str(root), "-p", "lib"])
        out, err = capsys.readouterr()
        assert code == 0
        assert out == "lib/mod.js\n"
        assert err == ""

    def test_failure_exit_code(self, tmp_path, capsys):
        code = main(["src/main.js", "./missing", "--root", str(tmp_path)])
        _, err = capsys.readouterr()
        assert code == 1
        assert err == "modresolve: error: Error resolving module './missing' from 'src/main.js'\n"

    def test_patterns_replace_default(self, make_tree, capsys):
        root = make_tree("src/util.js", "src/util.mjs")
        code = main(["src/main.js", "./util", "--root", str(root), "--pattern", "{}.mjs"])
        out, _ = capsys.readouterr()
        assert code == 0
        assert out == "src/util.mjs\n"

    def test_native(self, make_tree, capsys):
        root = make_tree("lib/libz.so", "lib/libz.dylib", "lib/z.dll")
        code = main(["main.js", "z", "--root", str(root), "-p", "lib", "--native"])
        out, _ = capsys.readouterr()
        assert code == 0
        assert out.strip() in ("lib/libz.so", "lib/libz.dylib", "lib/z.dll")

    def test_search_paths_in_order(self, make_tree, capsys):
        root = make_tree("a/mod.js", "b/mod.js")
        code = main(["main.js", "mod", "--root", str(root), "-p", "b", "-p", "a"])
        out, _ = capsys.readouterr()
        assert code == 0
        assert out == "b/mod.js\n"

    def test_search_paths_only_from_arguments(self, make_tree, monkeypatch, capsys):
        root = make_tree("b/mod.js")
        monkeypatch.setenv("MODRESOLVE_PATH", "b")
        code = main(["main.js", "mod", "--root", str(root)])
        out, _ = capsys.readouterr()
        assert code == 1
        assert out == ""

    def test_root_must_be_directory(self, tmp_path, capsys):
        code = main(["main.js", "mod", "--root", str(tmp_path / "nope")])
        _, err = capsys.readouterr()
        assert code == 1
        assert "not a directory" in err
