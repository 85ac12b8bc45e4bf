from __future__ import annotations

from src.shared.env import load_secret_file_variables, read_secret_file


def test_secret_file_is_exposed_as_variable(tmp_path) -> None:
    secret_file = tmp_path / "supabase_key"
    secret_file.write_text("s3cr3t\n", encoding="utf-8")
    environ = {"SUPABASE_API_KEY_FILE": str(secret_file)}

    load_secret_file_variables(environ)

    assert environ["SUPABASE_API_KEY"] == "s3cr3t"


def test_existing_variable_is_not_overwritten(tmp_path) -> None:
    secret_file = tmp_path / "key"
    secret_file.write_text("from-file", encoding="utf-8")
    environ = {"SUPABASE_API_KEY": "present", "SUPABASE_API_KEY_FILE": str(secret_file)}

    load_secret_file_variables(environ)

    assert environ["SUPABASE_API_KEY"] == "present"


def test_missing_or_empty_paths_are_skipped(tmp_path) -> None:
    environ = {
        "MISSING_FILE": str(tmp_path / "does-not-exist"),
        "EMPTY_FILE": "",
    }

    load_secret_file_variables(environ)

    assert "MISSING" not in environ
    assert "EMPTY" not in environ


def test_undecodable_secret_is_ignored(tmp_path) -> None:
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")

    assert read_secret_file(str(binary_file)) is None
