# mixinkit

mixinkit creates TypeScript mixin files for blueprint assets from a template. It also keeps an
auto-import entry file up to date, and it can remove the generated files again.

## What it does

An asset is named by its package path and its name, for example `/Game/Characters/MyCharacterBP`.
For each asset, `generate` does the following:

- It reads the template and replaces these placeholders. Case is ignored when matching them.
  - `<AssetName>`: the asset name, for example `MyCharacterBP`.
  - `<AssetPath>`: the package path, for example `/Game/Characters`.
  - `<FullObjectPath>`: the object path, for example `/Game/Characters/MyCharacterBP.MyCharacterBP`.
  - `<AssetTypes>`: the type name, for example `UE.Game.Characters.MyCharacterBP.MyCharacterBP_C`.
    A path segment made only of digits gets a leading underscore, so `/Game/01/Foo` becomes
    `UE.Game._01.Foo.Foo_C`.
- It writes the result to `<project>/<output path>/<package path without /Game>/<AssetName>.ts`.
  - An existing file is never overwritten. Instead the import line is still ensured and a
    warning is reported.
- It adds a line such as `import './Characters/MyCharacterBP';` to the auto-import file
  `<project>/<output path>/<auto-import file name>`. The file is created if it is missing.

For each asset, `delete` does the following:

- It removes the `.ts` file.
- It removes the compiled `<AssetName>.js` and `<AssetName>.js.map` from
  `<content dir>/JavaScript/<package path without /Game>/`. The content directory defaults to
  `<project>/Content`.
- It removes the matching import line from the auto-import file, along with any blank lines.

Each asset yields a `GenerateResult` with a `GenerateStatus` of `SUCCESS`, `FAILED` or `WARNING`,
plus a message. A `Report` groups these messages under a success, a failure and a warning heading.

## Settings

`mixinkit.settings.Settings` holds three values:

| Field | Default |
| --- | --- |
| `output_path` | `TypeScript` |
| `auto_import_file_name` | `MainGame.ts` |
| `node_command` | `/c npm run dev` |

`load_settings(path)` reads these values from an INI file using the keys `OutputPath`,
`AutoImportFileName` and `NodeCommand`. Values may be in double quotes.

- If the section named by `mixinkit.settings.SECTION` is present, only that section is read.
- Otherwise, every section is read.
- A missing file or missing key keeps the default.

## Command line

```
mixinkit [--project-dir DIR] [--config FILE] [--content-dir DIR] generate --template FILE ASSET...
mixinkit [--project-dir DIR] [--config FILE] [--content-dir DIR] delete [--yes] ASSET...
```

- `--project-dir` is the project directory. It defaults to the current directory.
- `--config` is an INI settings file.
- `ASSET` is a path such as `/Game/Characters/MyCharacterBP` or
  `/Game/Characters/MyCharacterBP.MyCharacterBP`.
- `generate` prints the report.
- `delete` asks for confirmation unless `--yes` is given, then prints the report.

## Library use

`mixinkit.generator` provides:

- `Asset(name, package_path)` for one asset, with an `object_path` property.
- `MixinProject(project_dir, template_path, settings=Settings(), content_dir=None)`. It has:
  - `generate(asset)` and `delete(asset)`, which return a `GenerateResult`.
  - `generate_all(assets)` and `delete_all(assets)`, which return a `Report`. Render it with
    `Report.format(separator)`.
- `build_replacements(asset)` and `apply_replacements(text, replacements)` for custom templating.

Lower-level helpers:

- `mixinkit.paths.sanitize_numeric_path_segments`
- `mixinkit.paths.import_line`
- `mixinkit.imports.add_import_statement`
- `mixinkit.imports.remove_import_statement`

## What it does not do

- It does not generate TypeScript declarations for the engine's types.
- It does not provide editor menus, and it does not react to assets being renamed.
- `node_command` is only read and stored. mixinkit never starts or stops a build or watch process.
- A `delete` reports success even when no mixin file existed.

## Running the tests

```
pip install -e .[test]
pytest
```