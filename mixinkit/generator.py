"""Generate and delete TypeScript mixin files for blueprint assets."""

from __future__ import annotations

import re
from contextlib import suppress
from dataclasses import dataclass, field
from pathlib import Path

from .imports import add_import_statement, remove_import_statement
from .paths import sanitize_numeric_path_segments
from .settings import Settings
from .status import GenerateResult, GenerateStatus, Report


@dataclass(frozen=True)
class Asset:
    """A blueprint asset: its name and the package path that holds it."""

    name: str
    package_path: str

    @property
    def object_path(self) -> str:
        return f"{self.package_path}/{self.name}.{self.name}"


def _strip_game_root(path: str) -> str:
    return re.sub(re.escape("/Game"), "", path, flags=re.IGNORECASE)


def _join(base: Path, relative: str) -> Path:
    return base.joinpath(*(part for part in relative.split("/") if part))


def build_replacements(asset: Asset) -> dict[str, str]:
    """Placeholder values for the mixin template."""
    types = sanitize_numeric_path_segments(asset.object_path).replace("/", ".")
    return {
        "<AssetName>": asset.name,
        "<AssetPath>": asset.package_path,
        "<FullObjectPath>": asset.object_path,
        "<AssetTypes>": f"UE{types}_C",
    }


def apply_replacements(text: str, replacements: dict[str, str]) -> str:
    """Replace each placeholder in turn, ignoring case."""
    for placeholder, value in replacements.items():
        text = re.sub(
            re.escape(placeholder),
            lambda _match, value=value: value,
            text,
            flags=re.IGNORECASE,
        )
    return text


@dataclass
class MixinProject:
    """A project directory into which mixin files are written."""

    project_dir: Path
    template_path: Path
    settings: Settings = field(default_factory=Settings)
    content_dir: Path | None = None

    def __post_init__(self) -> None:
        self.project_dir = Path(self.project_dir)
        self.template_path = Path(self.template_path)
        self.content_dir = (
            self.project_dir / "Content"
            if self.content_dir is None
            else Path(self.content_dir)
        )

    @property
    def output_root(self) -> Path:
        return _join(self.project_dir, self.settings.output_path)

    @property
    def auto_import_path(self) -> Path:
        return self.output_root / self.settings.auto_import_file_name

    def _mixin_path(self, asset: Asset) -> Path:
        return _join(self.output_root, _strip_game_root(asset.package_path)) / f"{asset.name}.ts"

    @staticmethod
    def _import_path(asset: Asset) -> str:
        return f"{_strip_game_root(asset.package_path)}/{asset.name}"

    def generate(self, asset: Asset) -> GenerateResult:
        output = self._mixin_path(asset)
        with suppress(OSError):
            output.parent.mkdir(parents=True, exist_ok=True)

        if output.is_file():
            add_import_statement(self.auto_import_path, self._import_path(asset))
            return GenerateResult(GenerateStatus.WARNING, f"文件已存在，无法覆盖: {output}")

        try:
            template = self.template_path.read_text(encoding="utf-8")
        except OSError:
            return GenerateResult(
                GenerateStatus.FAILED, f"读取模板文件失败: {self.template_path}"
            )

        content = apply_replacements(template, build_replacements(asset))
        try:
            output.write_text(content, encoding="utf-8")
        except OSError:
            return GenerateResult(GenerateStatus.FAILED, f"写入文件失败: {output}")

        add_import_statement(self.auto_import_path, self._import_path(asset))
        return GenerateResult(GenerateStatus.SUCCESS, f"Mixin 文件已生成: {output}")

    def delete(self, asset: Asset) -> GenerateResult:
        output = self._mixin_path(asset)
        compiled = (
            _join(self.content_dir / "JavaScript", _strip_game_root(asset.package_path))
            / f"{asset.name}.js"
        )
        import_path = self._import_path(asset)

        if output.is_file():
            for leftover in (compiled.with_name(compiled.name + ".map"), compiled):
                with suppress(OSError):
                    leftover.unlink()
            try:
                output.unlink()
            except OSError:
                return GenerateResult(GenerateStatus.FAILED, f"删除失败: {output}")
        else:
            remove_import_statement(self.auto_import_path, import_path)

        if self.auto_import_path.is_file():
            remove_import_statement(self.auto_import_path, import_path)

        return GenerateResult(GenerateStatus.SUCCESS, f"已删除文件及import引用: {output}")

    def generate_all(self, assets) -> Report:
        report = Report()
        for asset in assets:
            report.add(self.generate(asset))
        return report

    def delete_all(self, assets) -> Report:
        report = Report("删除成功:", "删除失败:", "警告:")
        for asset in assets:
            report.add(self.delete(asset))
        return report