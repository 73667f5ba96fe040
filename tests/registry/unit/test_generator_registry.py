"""Generator registry and template engine tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from oas_proptypes import PropTypesGenerator, RegistryError
from oas_proptypes.core.config import GeneratorConfig
from oas_proptypes.core.templates import TemplateEngine, TemplateError
from oas_proptypes.languages.proptypes import (
    create_consistent_reference_generator,
    create_lenient_generator,
)
from oas_proptypes.registry import (
    GeneratorRegistry,
    get_generator,
    get_target_info,
    is_target_supported,
    list_supported_targets,
)


def _registry() -> GeneratorRegistry:
    registry = GeneratorRegistry()
    registry.register("proptypes", PropTypesGenerator, aliases=["react"])
    return registry


def test_builtin_target_and_aliases_are_registered() -> None:
    assert list_supported_targets() == ["proptypes"]
    assert is_target_supported("PropTypes")
    assert is_target_supported("prop-types")
    assert is_target_supported("react")
    assert not is_target_supported("go")


def test_alias_resolves_to_primary_target() -> None:
    registry = _registry()

    assert registry.resolve("REACT") == "proptypes"
    assert registry.get_generator_class("react") is PropTypesGenerator


def test_unknown_target_is_rejected() -> None:
    with pytest.raises(RegistryError, match="No generator registered for target: vue"):
        _registry().resolve("vue")


def test_register_requires_code_generator_subclass() -> None:
    with pytest.raises(RegistryError, match="must inherit from CodeGenerator"):
        GeneratorRegistry().register("broken", dict)


def test_alias_cannot_shadow_another_target() -> None:
    registry = _registry()

    with pytest.raises(RegistryError, match="already points to 'proptypes'"):
        registry.register("other", PropTypesGenerator, aliases=["react"])


def test_unregister_drops_aliases() -> None:
    registry = _registry()
    registry.unregister("proptypes")

    assert registry.list_targets() == []
    assert not registry.is_supported("react")


def test_create_generator_accepts_each_config_source(tmp_path: Path) -> None:
    registry = _registry()
    config_path = tmp_path / "proptypes.json"
    config_path.write_text(json.dumps({"component_suffix": "Shape"}), encoding="utf-8")

    from_object = registry.create_generator("react", GeneratorConfig(use_tabs=False))
    from_dict = registry.create_generator("proptypes", {"validator_namespace": "PT"})
    from_file = registry.create_generator("proptypes", str(config_path))

    assert from_object.indent_unit == "    "
    assert from_dict.namespace == "PT"
    assert from_file.namer.component_name("order") == "OrderShape"


def test_create_generator_rejects_other_config_types() -> None:
    with pytest.raises(RegistryError, match="Invalid config type"):
        _registry().create_generator("proptypes", 42)


def test_target_info() -> None:
    info = get_target_info("react")

    assert info["name"] == "proptypes"
    assert info["class"] == "PropTypesGenerator"
    assert info["file_extension"] == ".js"
    assert info["aliases"] == ["prop-types", "react"]


def test_factory_helpers_configure_generators() -> None:
    assert create_consistent_reference_generator().shape_reference_style == "identifier"
    assert create_lenient_generator().config.strict_types is False
    assert isinstance(get_generator(), PropTypesGenerator)


def test_generator_registers_its_templates() -> None:
    generator = get_generator()

    assert generator.template_exists("proptypes_file.js.j2")
    assert generator.template_exists("proptypes_block.js.j2")
    assert not generator.template_exists("missing.j2")


def test_template_engine_keeps_text_verbatim() -> None:
    engine = TemplateEngine()
    engine.add_template("line.j2", "{{ key }}: {{ value }},\n")

    rendered = engine.render_template("line.j2", {"key": "'x-id'", "value": "<b>"})

    assert rendered == "'x-id': <b>,\n"


def test_template_engine_reports_undefined_variables() -> None:
    engine = TemplateEngine()

    with pytest.raises(TemplateError, match="Failed to render template string"):
        engine.render_string("{{ missing }}", {})


def test_template_engine_loads_from_directory(tmp_path: Path) -> None:
    (tmp_path / "greeting.j2").write_text("hello {{ name }}\n", encoding="utf-8")
    engine = TemplateEngine(tmp_path)

    assert engine.template_exists("greeting.j2")
    assert engine.render_template("greeting.j2", {"name": "world"}) == "hello world\n"
