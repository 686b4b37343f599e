"""Unit tests for namecheck.presets: PresetLibrary and the built-in presets."""
from __future__ import annotations

from typing import Any

import pytest

from namecheck.engine import ComplianceEngine
from namecheck.matcher import ReasonCode
from namecheck.presets import PresetLibrary, PresetMetadata
from namecheck.rules import MalformedRuleError, RuleSet, RuleSource

BUILTIN_NAMES = ["cpp", "css", "javascript", "mysql", "php", "typescript"]


@pytest.fixture()
def library() -> PresetLibrary:
    return PresetLibrary()


def _check(preset: str, text: str, kind: str, library: PresetLibrary) -> Any:
    engine = ComplianceEngine()
    engine.load([library.load_document(preset)], default_layer=RuleSource.PRESET)
    language = library.get_metadata(preset).language
    report = engine.run([{"text": text, "kind": kind, "language": language}])
    return report.violations[0] if report.violations else None


# ===========================================================================
# PresetLibrary
# ===========================================================================


class TestPresetLibrary:
    def test_builtins_registered(self, library: PresetLibrary) -> None:
        assert library.list_names() == BUILTIN_NAMES
        assert len(library) == 6
        assert "php" in library

    def test_empty_library(self) -> None:
        library = PresetLibrary(auto_load_builtins=False)
        assert len(library) == 0
        assert library.list_presets() == []

    def test_metadata(self, library: PresetLibrary) -> None:
        meta = library.get_metadata("cpp")
        assert isinstance(meta, PresetMetadata)
        assert meta.language == "cpp"
        assert "clang-tidy" in meta.tags

    def test_list_presets_sorted(self, library: PresetLibrary) -> None:
        assert [m.name for m in library.list_presets()] == BUILTIN_NAMES

    def test_for_language(self, library: PresetLibrary) -> None:
        assert [m.name for m in library.for_language("TypeScript")] == ["typescript"]
        assert library.for_language("cobol") == []

    def test_unknown_preset(self, library: PresetLibrary) -> None:
        with pytest.raises(KeyError, match="Available presets"):
            library.load_document("cobol")
        with pytest.raises(KeyError):
            library.get_metadata("cobol")

    def test_load_document_returns_copy(self, library: PresetLibrary) -> None:
        document = library.load_document("javascript")
        document["rules"].clear()
        assert library.load_document("javascript")["rules"]

    def test_load_rules_are_preset_layer(self, library: PresetLibrary) -> None:
        rules = library.load_rules("mysql")
        assert rules
        assert {r.source for r in rules} == {RuleSource.PRESET}
        assert {r.applies_to.language for r in rules} == {"mysql"}

    def test_register(self, library: PresetLibrary) -> None:
        document = {
            "language": "JavaScript",
            "description": "House style",
            "rules": [{"name": "house-var", "kinds": ["variable"], "casing": ["snake_case"]}],
        }
        library.register("house-js", document, tags=("house",))
        assert "house-js" in library
        meta = library.get_metadata("house-js")
        assert meta.language == "javascript"
        assert meta.description == "House style"
        assert [m.name for m in library.for_language("javascript")] == ["house-js", "javascript"]

    def test_register_duplicate(self, library: PresetLibrary) -> None:
        with pytest.raises(ValueError, match="already registered"):
            library.register("php", {"rules": []})

    def test_register_overwrite(self, library: PresetLibrary) -> None:
        library.register("php", {"language": "php", "rules": []}, overwrite=True)
        assert library.load_rules("php") == []

    def test_register_validates_document(self, library: PresetLibrary) -> None:
        with pytest.raises(MalformedRuleError):
            library.register("broken", {"rules": [{"name": "x", "casing": "Title Case"}]})
        assert "broken" not in library


# ===========================================================================
# Built-in presets
# ===========================================================================


class TestBuiltinPresets:
    @pytest.mark.parametrize("name", BUILTIN_NAMES)
    def test_each_preset_loads_unambiguously(self, library: PresetLibrary, name: str) -> None:
        assert len(RuleSet(library.load_rules(name))) > 0

    def test_all_presets_combine(self, library: PresetLibrary) -> None:
        rules = [rule for name in library.list_names() for rule in library.load_rules(name)]
        assert len(RuleSet(rules)) == len(rules)

    @pytest.mark.parametrize(
        "preset, text, kind",
        [
            ("javascript", "userName", "variable"),
            ("javascript", "MAX_RETRIES", "constant"),
            ("javascript", "#count", "privateField"),
            ("javascript", "ValidationError", "exception"),
            ("javascript", "user-profile", "file"),
            ("typescript", "UserRepository", "interface"),
            ("typescript", "TKey", "typeParameter"),
            ("typescript", "hasChildren", "booleanProperty"),
            ("css", "card__title", "bemElement"),
            ("css", "card__title--active", "bemModifier"),
            ("css", "--main-color", "cssCustomProperty"),
            ("css", "data-user-id", "htmlDataAttribute"),
            ("cpp", "count_", "privateField"),
            ("cpp", "kMaxSize", "constant"),
            ("cpp", "HttpServer", "class"),
            ("cpp", "parse_header", "function"),
            ("cpp", "MD5SUM", "macro"),
            ("cpp", "ParseError", "exception"),
            ("cpp", "UserNotFoundException", "exception"),
            ("php", "UserRepositoryInterface", "interface"),
            ("php", "getUser", "method"),
            ("php", "array_flatten", "function"),
            ("mysql", "order_items", "table"),
            ("mysql", "id", "primaryKey"),
            ("mysql", "idx_users_email", "index"),
        ],
    )
    def test_conforming_names(self, library: PresetLibrary, preset: str, text: str, kind: str) -> None:
        assert _check(preset, text, kind, library) is None

    @pytest.mark.parametrize(
        "preset, text, kind, reason, suggestions",
        [
            ("typescript", "IUserRepository", "interface", ReasonCode.FORBIDDEN_PATTERN, ()),
            ("typescript", "_cache", "privateField", ReasonCode.FORBIDDEN_PATTERN, ()),
            ("javascript", "active", "booleanVariable", ReasonCode.MISSING_AFFIX, ("isActive",)),
            ("css", "--mainColor", "cssCustomProperty", ReasonCode.WRONG_CASING, ("--main-color",)),
            ("css", "card_title", "bemElement", ReasonCode.PATTERN_MISMATCH, ()),
            ("cpp", "Count_", "privateField", ReasonCode.WRONG_CASING, ("count_",)),
            ("cpp", "MAX_SIZE", "constant", ReasonCode.MISSING_AFFIX, ("kMaxSize",)),
            ("cpp", "UserNotFound", "exception", ReasonCode.MISSING_AFFIX, ("UserNotFoundError",)),
            ("cpp", "__reserved", "variable", ReasonCode.FORBIDDEN_PATTERN, ()),
            ("php", "is_active", "booleanProperty", ReasonCode.WRONG_CASING, ("isActive",)),
            ("php", "UserNotFound", "exception", ReasonCode.MISSING_AFFIX, ("UserNotFoundException",)),
            ("mysql", "order", "table", ReasonCode.RESERVED_WORD, ()),
            ("mysql", "ORDER", "table", ReasonCode.RESERVED_WORD, ()),
            ("mysql", "userId", "foreignKey", ReasonCode.MISSING_AFFIX, ("user_id",)),
            ("mysql", "users_email", "index", ReasonCode.MISSING_AFFIX, ("idx_users_email",)),
            ("mysql", "pk", "primaryKey", ReasonCode.PATTERN_MISMATCH, ()),
        ],
    )
    def test_violations(
        self,
        library: PresetLibrary,
        preset: str,
        text: str,
        kind: str,
        reason: ReasonCode,
        suggestions: tuple[str, ...],
    ) -> None:
        violation = _check(preset, text, kind, library)
        assert violation is not None
        assert violation.reason is reason
        assert violation.suggestions == suggestions
