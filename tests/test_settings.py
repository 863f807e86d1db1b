from mixinkit.settings import SECTION, Settings, load_settings


def test_defaults_match_source():
    settings = Settings()
    assert settings.output_path == "TypeScript"
    assert settings.auto_import_file_name == "MainGame.ts"
    assert settings.node_command == "/c npm run dev"


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.ini") == Settings()


def test_reads_known_section(tmp_path):
    ini = tmp_path / "DefaultPuertsExpand.ini"
    ini.write_text(
        f"[{SECTION}]\nOutputPath=Scripts\nAutoImportFileName=\"Entry.ts\"\n",
        encoding="utf-8",
    )
    settings = load_settings(ini)
    assert settings.output_path == "Scripts"
    assert settings.auto_import_file_name == "Entry.ts"
    assert settings.node_command == Settings().node_command


def test_known_section_wins_over_others(tmp_path):
    ini = tmp_path / "cfg.ini"
    ini.write_text(
        "[Other]\nOutputPath=Wrong\n\n" f"[{SECTION}]\nOutputPath=Right\n",
        encoding="utf-8",
    )
    assert load_settings(ini).output_path == "Right"


def test_any_section_used_when_known_missing(tmp_path):
    ini = tmp_path / "cfg.ini"
    ini.write_text("[Anything]\nAutoImportFileName=Index.ts\n", encoding="utf-8")
    settings = load_settings(ini)
    assert settings.auto_import_file_name == "Index.ts"
    assert settings.output_path == "TypeScript"