import numpy as np

from plateview.config import AppConfig
from plateview.pipeline import FramePipeline
from plateview.render.fps import FrameRateMonitor
from plateview.render.overlay import WARM_COLOR


def test_process_keeps_buffers_separate(make_engine, plate):
    engine = make_engine([plate])
    pipeline = FramePipeline(engine, detect_color=0)
    frame = np.zeros((1280, 1280, 3), dtype=np.uint8)
    original = frame.copy()

    context = pipeline.process(frame)

    assert context.raw is frame
    np.testing.assert_array_equal(frame, original)
    assert not np.shares_memory(context.display, frame)
    assert not np.shares_memory(context.model_input, frame)
    assert context.model_input.shape == (640, 640, 3)
    assert context.display.shape == frame.shape
    assert context.display.any()


def test_process_passes_model_input_and_color_mode(make_engine):
    engine = make_engine(model_width=416, model_height=256)
    pipeline = FramePipeline(engine, detect_color=0)

    pipeline.process(np.zeros((480, 640, 3), dtype=np.uint8))

    assert engine.calls == [((256, 416, 3), 0)]


def test_scale_recomputed_for_every_frame(make_engine, plate):
    pipeline = FramePipeline(make_engine([plate]))

    first = pipeline.process(np.zeros((1280, 1280, 3), dtype=np.uint8))
    second = pipeline.process(np.zeros((320, 640, 3), dtype=np.uint8))

    assert first.scale == (2.0, 2.0)
    assert second.scale == (1.0, 0.5)


def test_end_to_end_frame_annotation(make_engine, plate):
    engine = make_engine([plate])
    monitor = FrameRateMonitor(clock=iter([0.0, 0.5]).__next__)
    pipeline = FramePipeline(engine, monitor=monitor)

    context = pipeline.process(np.zeros((1280, 1280, 3), dtype=np.uint8))

    assert context.detections == [plate]
    assert context.fps == 2.0
    annotation = pipeline.renderer.annotate(context.detections[0], context.scale)
    assert annotation.pixel_points == [(20, 20), (40, 20), (40, 40), (20, 40)]
    assert annotation.text == "G | Red | conf=0.87"
    assert tuple(context.display[40, 30]) == WARM_COLOR


def test_detections_are_owned_per_call(make_engine, plate):
    engine = make_engine([plate])
    pipeline = FramePipeline(engine)

    first = pipeline.process(np.zeros((640, 640, 3), dtype=np.uint8))
    engine.results.clear()
    second = pipeline.process(np.zeros((640, 640, 3), dtype=np.uint8))

    assert first.detections == [plate]
    assert second.detections == []


def test_from_config_uses_class_names(make_engine):
    config = AppConfig.from_args(
        engine="pkg:Engine", source_path="0", class_names=["A", "B"], detect_color=0
    )
    pipeline = FramePipeline.from_config(config, make_engine())

    assert pipeline.renderer.catalog.names == ("A", "B")
    assert pipeline.detect_color == 0
