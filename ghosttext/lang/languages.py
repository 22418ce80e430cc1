"""Static language table: comment syntax and file extensions per language id."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LanguageSyntax:
    comment_start: str
    comment_end: str | None = None


@dataclass(frozen=True)
class LanguageDetails:
    name: str
    file_extensions: tuple[str, ...]
    syntax: LanguageSyntax | None
    derived_from: str | None = None


_BLOCK = LanguageSyntax("/*", "*/")
_MARKUP = LanguageSyntax("<!--", "-->")
_HASH = LanguageSyntax("#")

SUPPORTED_LANGUAGES: dict[str, LanguageDetails] = {
    "bat": LanguageDetails("BAT file", (".bat", ".cmd"), LanguageSyntax("REM")),
    "c": LanguageDetails("C", (".c", ".h"), _BLOCK),
    "csharp": LanguageDetails("C#", (".cs",), _BLOCK),
    "cpp": LanguageDetails("C++", (".cpp", ".h"), _BLOCK),
    "css": LanguageDetails("CSS", (".css",), _BLOCK),
    "go": LanguageDetails("Go", (".go",), _BLOCK),
    "html": LanguageDetails("HTML", (".htm", ".html"), _MARKUP),
    "java": LanguageDetails("Java", (".java",), _BLOCK),
    "javascript": LanguageDetails("Javascript", (".js", ".jsx", ".cjs"), _BLOCK),
    "javascriptreact": LanguageDetails("Javascript JSX", (".jsx",), _BLOCK),
    "json": LanguageDetails("JSON", (".json", ".jsonl", ".geojson"), None),
    "jsx": LanguageDetails("JSX", (".jsx",), _BLOCK),
    "kotlin": LanguageDetails("Kotlin", (".kt", ".ktm", ".kts"), _BLOCK),
    "objective-c": LanguageDetails("Objective C", (".h", ".m", ".mm"), _BLOCK),
    "php": LanguageDetails(
        "PHP",
        (".aw", ".ctp", ".fcgi", ".inc", ".php", ".php3", ".php4", ".php5", ".phps", ".phpt"),
        _BLOCK,
    ),
    "python": LanguageDetails("Python", (".py",), LanguageSyntax("'''", "'''")),
    "rust": LanguageDetails("Rust", (".rs", ".rs.in"), _BLOCK),
    "sass": LanguageDetails("SASS", (".sass",), _BLOCK),
    "scss": LanguageDetails("SCSS", (".scss",), _BLOCK),
    "shellscript": LanguageDetails("Shell", (".bash", ".sh"), _HASH),
    "swift": LanguageDetails("Swift", (".swift",), _BLOCK),
    "typescript": LanguageDetails("Typescript", (".ts", ".cts", ".mts"), _BLOCK),
    "typescriptreact": LanguageDetails("Typescript React", (".tsx",), _BLOCK, derived_from="typescript"),
    "xml": LanguageDetails("XML", (".xml",), _MARKUP),
    "yaml": LanguageDetails("YAML", (".yml", ".yaml"), _HASH),
    "lua": LanguageDetails("Lua", (".lua",), LanguageSyntax("--", "--[[ ]]--")),
    "perl": LanguageDetails("Perl", (".pl", ".pm"), _HASH),
    "r": LanguageDetails("R", (".r", ".R"), _HASH),
    "ruby": LanguageDetails("Ruby", (".rb",), LanguageSyntax("=begin", "=end")),
    "scala": LanguageDetails("Scala", (".scala",), _BLOCK),
    "sql": LanguageDetails("SQL", (".sql",), _BLOCK),
    "typescriptreactnative": LanguageDetails(
        "Typescript React Native", (".tsx",), _BLOCK, derived_from="typescript"
    ),
    "xaml": LanguageDetails("XAML", (".xaml",), _MARKUP),
}


def language_syntax(language_id: str | None) -> LanguageSyntax | None:
    """Return the comment syntax for ``language_id``, or ``None`` when unknown."""

    if not language_id:
        return None
    details = SUPPORTED_LANGUAGES.get(language_id)
    return details.syntax if details else None


def language_for_path(path: str | Path) -> str | None:
    """Guess a language id from a file name; the first table entry wins on shared extensions."""

    name = Path(path).name
    best: tuple[int, str] | None = None
    for language_id, details in SUPPORTED_LANGUAGES.items():
        for extension in details.file_extensions:
            if name.endswith(extension) and (best is None or len(extension) > best[0]):
                best = (len(extension), language_id)
    return best[1] if best else None
