import textwrap

import pytest
from PIL import Image

from plateview.__main__ import main
from plateview.config import ModelConfig
from plateview.detection.loader import load_engine, resolve_factory

ENGINE_MODULE = """\
class Engine:
    model_width = 640
    model_height = 480

    def __init__(self, xml_path, bin_path, device):
        self.args = (xml_path, bin_path, device)

    def infer(self, frame, detect_color):
        return []


class Sizeless:
    def __init__(self, *args):
        pass


NOT_CALLABLE = 42
"""


@pytest.fixture
def engine_module(tmp_path, monkeypatch):
    name = f"fake_engine_{tmp_path.name}"
    (tmp_path / f"{name}.py").write_text(textwrap.dedent(ENGINE_MODULE))
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


def test_load_engine_calls_factory_with_model_config(engine_module):
    model = ModelConfig(xml_path="m.xml", bin_path="m.bin", device="GPU")

    engine = load_engine(f"{engine_module}:Engine", model)

    assert engine.args == ("m.xml", "m.bin", "GPU")
    assert (engine.model_width, engine.model_height) == (640, 480)


@pytest.mark.parametrize("spec", ["no_colon", ":Engine", "module:", ""])
def test_resolve_factory_rejects_malformed_spec(spec):
    with pytest.raises(ValueError):
        resolve_factory(spec)


def test_resolve_factory_rejects_missing_or_plain_attribute(engine_module):
    with pytest.raises(ValueError):
        resolve_factory(f"{engine_module}:Missing")
    with pytest.raises(ValueError):
        resolve_factory(f"{engine_module}:NOT_CALLABLE")


def test_load_engine_requires_model_size(engine_module):
    with pytest.raises(ValueError):
        load_engine(f"{engine_module}:Sizeless", ModelConfig())


def test_resolve_factory_missing_module():
    with pytest.raises(ImportError):
        resolve_factory("plateview_no_such_module:Engine")


def test_main_reports_unloadable_engine(tmp_path):
    source = tmp_path / "frame.png"
    Image.new("RGB", (8, 8)).save(source)

    assert main([str(source), "--engine", "plateview_no_such_module:Engine"]) == 1


def test_main_headless_run(tmp_path, engine_module):
    source = tmp_path / "frame.png"
    Image.new("RGB", (64, 48)).save(source)

    assert main([str(source), "--engine", f"{engine_module}:Engine", "--headless"]) == 0
