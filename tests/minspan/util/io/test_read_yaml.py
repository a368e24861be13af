import pytest
from minspan.util.io.read_yaml import read_yaml

class TestReadYaml:
    def test_read_dict_returns_copy(self):
        data = {"tokens": "words"}
        result = read_yaml(data)
        assert result == data
        assert result is not data

    def test_read_file_success(self, tmp_path):
        cf = tmp_path / "config.yaml"
        cf.write_text("tokens: words\n")
        assert read_yaml(str(cf)) == {"tokens": "words"}

    def test_empty_file(self, tmp_path):
        cf = tmp_path / "config.yaml"
        cf.write_text("")
        assert read_yaml(str(cf)) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_yaml(str(tmp_path / "missing.yaml"))

    def test_bad_yaml(self, tmp_path):
        cf = tmp_path / "config.yaml"
        cf.write_text("tokens: [words\n")
        with pytest.raises(ValueError, match="Error parsing YAML file"):
            read_yaml(str(cf))

    def test_not_a_mapping(self, tmp_path):
        cf = tmp_path / "config.yaml"
        cf.write_text("- chars\n- words\n")
        with pytest.raises(ValueError, match="must hold a mapping"):
            read_yaml(str(cf))

    def test_override_keys(self, tmp_path):
        cf = tmp_path / "config.yaml"
        cf.write_text("tokens: chars\n")
        config = read_yaml(str(cf), override_keys={"tokens": "words"})
        assert config["tokens"] == "words"

    def test_override_none_is_ignored(self):
        data = {"tokens": "words"}
        config = read_yaml(data, override_keys={"tokens": None})
        assert config["tokens"] == "words"

    def test_override_does_not_modify_input(self):
        data = {"tokens": "chars"}
        read_yaml(data, override_keys={"tokens": "words"})
        assert data["tokens"] == "chars"

    def test_override_unknown_key(self):
        with pytest.raises(ValueError, match="override_keys has a key 'other'"):
            read_yaml({"tokens": "chars"}, override_keys={"other": 1})
