"""Test the command line entry point."""

import json

import pytest

from pairforge import cli
from .conftest import ScriptedModel


@pytest.fixture
def fake_model(monkeypatch):
    holder = {}

    def fake_get_model(model=None, api_key=None):
        holder["model"] = ScriptedModel(
            ["What is 2+2?", "What is 3+3?", "4", "6"],
            model=model or "fake-default",
        )
        return holder["model"]

    monkeypatch.setattr(cli, "get_model", fake_get_model)
    return holder


class TestGenerateCommand:
    def test_writes_export(self, fake_model, tmp_path, capsys):
        output = tmp_path / "pairs.json"
        code = cli.main(["--domain", "math", "--type", "qa", "-n", "2", "-o", str(output)])

        assert code == 0
        with open(output) as f:
            assert json.load(f) == [
                {"instruction": "What is 2+2?", "answer": "4"},
                {"instruction": "What is 3+3?", "answer": "6"},
            ]
        assert "Generated 2 pairs" in capsys.readouterr().out

    def test_default_filename(self, fake_model, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["--domain", "math", "--type", "qa", "-n", "2"]) == 0
        assert (tmp_path / "math-qa-pairs.json").exists()

    def test_default_filename_stays_in_working_directory(self, fake_model, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["--domain", "bio/chem", "--type", "qa", "-n", "2"]) == 0

        assert (tmp_path / "bio_chem-qa-pairs.json").exists()
        assert not (tmp_path / "bio").exists()

    def test_explicit_output_not_rewritten(self, fake_model, tmp_path):
        output = tmp_path / "nested" / "pairs.json"
        assert cli.main(["--domain", "bio/chem", "-n", "1", "-o", str(output)]) == 0
        assert output.exists()

    def test_eval_variant(self, fake_model, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["--domain", "general", "-n", "2", "--eval"]) == 0

        with open(tmp_path / "general-eval-pairs.json") as f:
            data = json.load(f)
        assert data[0] == {"question": "What is 2+2?", "answer": "4"}
        # Evaluation sets are generated as Q&A
        assert "type: qa" in fake_model["model"].prompts[0]

    def test_model_forwarded(self, fake_model, tmp_path):
        cli.main([
            "--domain", "math", "--type", "qa", "-n", "1",
            "--model", "llama-3.2-1b-preview", "-o", str(tmp_path / "o.json"),
        ])
        calls = fake_model["model"].calls
        assert {c["model"] for c in calls} == {"llama-3.2-1b-preview"}

    def test_failure_writes_nothing(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr(
            cli, "get_model", lambda model=None, api_key=None: ScriptedModel(fail_on=3)
        )
        output = tmp_path / "pairs.json"
        code = cli.main(["--domain", "math", "--type", "qa", "-n", "2", "-o", str(output)])

        assert code == 1
        assert not output.exists()
        assert "Generation Failed" in capsys.readouterr().out

    def test_missing_api_key(self, monkeypatch, capsys):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        code = cli.main(["--domain", "math", "-n", "1"])
        assert code == 1
        assert "GROQ_API_KEY" in capsys.readouterr().out


class TestArguments:
    @pytest.mark.parametrize("n", ["0", "11", "-1"])
    def test_num_out_of_range(self, n):
        with pytest.raises(SystemExit):
            cli.main(["-n", n])

    def test_unknown_type(self):
        with pytest.raises(SystemExit):
            cli.main(["--type", "essay"])

    def test_list_models(self, capsys):
        assert cli.main(["--list-models"]) == 0
        out = capsys.readouterr().out
        assert "llama-3.2-90b-vision-preview" in out
