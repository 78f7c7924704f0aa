"""Test that all public imports work without crashing."""


def test_import_package():
    import pairforge
    assert hasattr(pairforge, "__version__")
    assert pairforge.__version__ == "0.1.0"


def test_import_model():
    from pairforge import BaseModel, Completion, ModelError, GroqModel
    assert issubclass(GroqModel, BaseModel)
    assert Completion is not None
    assert issubclass(ModelError, RuntimeError)


def test_import_synthesis():
    from pairforge import (
        EXAMPLE_TYPES,
        build_instruction_prompt,
        build_answer_prompt,
        PairGenerator,
        GenerationRequest,
        GenerationState,
    )
    assert EXAMPLE_TYPES == ("qa", "dialogue", "instruction", "completion", "few_shot")
    assert callable(build_instruction_prompt)
    assert callable(build_answer_prompt)
    assert hasattr(GenerationState, "GENERATING_ANSWERS")
    assert PairGenerator is not None
    assert GenerationRequest is not None


def test_import_export():
    from pairforge import export_filename, eval_export_filename, to_json, write_export
    assert all(callable(f) for f in [export_filename, eval_export_filename, to_json, write_export])


def test_import_web_app():
    from app.main import app
    paths = {route.path for route in app.routes}
    assert "/api/generate" in paths
    assert "/api/export" in paths
