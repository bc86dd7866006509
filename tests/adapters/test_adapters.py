import numpy as np
import pytest
from crayon.adapters import ColorAdapter, ComponentListAdapter, NDArrayAdapter
from crayon.components import RgbComponents, HsbComponents
from crayon.types.color_types import ColorSpace
from crayon.types.format_type import FormatType


class CountingAdapter(ColorAdapter):
    """Minimal adapter that only implements the required capabilities."""

    def __init__(self):
        self.reads = 0

    def rgb_components(self, color):
        self.reads += 1
        return RgbComponents(*color)

    def from_rgb(self, components):
        return components.value


def test_adapter_requires_capabilities():
    with pytest.raises(TypeError):
        ColorAdapter()


def test_default_hsb_goes_through_rgb():
    adapter = CountingAdapter()
    hsb = adapter.hsb_components((0.0, 1.0, 0.0, 1.0))
    assert hsb == HsbComponents(1 / 3, 1.0, 1.0, 1.0)
    assert adapter.reads == 1
    assert np.allclose(adapter.from_hsb(HsbComponents(0.0, 1.0, 1.0)), (1.0, 0.0, 0.0, 1.0))


# ------------------ component lists ------------------

def test_component_list_layouts():
    adapter = ComponentListAdapter()
    assert adapter.rgb_components([0.5]) == RgbComponents(0.5, 0.5, 0.5, 1.0)
    assert adapter.rgb_components([0.5, 0.2]) == RgbComponents(0.5, 0.5, 0.5, 0.2)
    assert adapter.rgb_components([1.0, 0.0, 0.0]) == RgbComponents(1.0, 0.0, 0.0, 1.0)
    assert adapter.rgb_components((1.0, 0.0, 0.0, 0.5, 9.0)) == RgbComponents(1.0, 0.0, 0.0, 0.5)


def test_component_list_without_components():
    adapter = ComponentListAdapter()
    assert adapter.rgb_components([]) is None
    assert adapter.rgb_components(None) is None
    assert adapter.hsb_components([]) is None


def test_component_list_output():
    adapter = ComponentListAdapter()
    assert adapter.from_rgb(RgbComponents(2.0, 0.5, -1.0, 0.5)) == (1.0, 0.5, 0.0, 0.5)
    assert adapter.hsb_components([0.0, 1.0, 0.0]) == HsbComponents(1 / 3, 1.0, 1.0, 1.0)
    assert np.allclose(adapter.from_hsb(HsbComponents(2 / 3, 1.0, 1.0)), (0.0, 0.0, 1.0, 1.0))


# ------------------ numpy vectors ------------------

def test_ndarray_rgb_int():
    adapter = NDArrayAdapter(ColorSpace.RGB, FormatType.INT)
    rgb = adapter.rgb_components(np.array([255, 128, 0], dtype=np.uint8))
    assert rgb == RgbComponents(1.0, 128 / 255, 0.0, 1.0)

    out = adapter.from_rgb(RgbComponents(1.0, 0.5, 0.0, 1.0))
    assert out.dtype == np.int64
    assert out.tolist() == [255, 128, 0, 255]


def test_ndarray_float_without_alpha():
    adapter = NDArrayAdapter(include_alpha=False)
    out = adapter.from_rgb(RgbComponents(0.1, 0.2, 0.3, 0.4))
    assert out.shape == (3,)
    assert np.allclose(out, (0.1, 0.2, 0.3))
    assert adapter.rgb_components(np.array([0.1, 0.2, 0.3, 0.4])) == RgbComponents(0.1, 0.2, 0.3, 0.4)


def test_ndarray_percentage():
    adapter = NDArrayAdapter(ColorSpace.RGB, FormatType.PERCENTAGE)
    assert adapter.rgb_components(np.array([100.0, 50.0, 0.0])) == RgbComponents(1.0, 0.5, 0.0, 1.0)


def test_ndarray_native_hsb():
    adapter = NDArrayAdapter(ColorSpace.HSB, FormatType.INT)
    green = np.array([120, 255, 255])

    assert adapter.hsb_components(green) == HsbComponents(1 / 3, 1.0, 1.0, 1.0)
    assert adapter.rgb_components(green) == RgbComponents(0.0, 1.0, 0.0, 1.0)
    assert adapter.from_rgb(RgbComponents(0.0, 1.0, 1.0)).tolist() == [180, 255, 255, 255]
    assert adapter.from_hsb(HsbComponents(0.5, 0.5, 0.5, 0.0)).tolist() == [180, 128, 128, 0]


def test_ndarray_native_hsb_keeps_hue_of_grays():
    # reading HSB directly skips the RGB round trip, so the hue survives
    adapter = NDArrayAdapter("hsb", "float")
    hsb = adapter.hsb_components(np.array([0.3, 0.0, 0.5]))
    assert hsb.hue == pytest.approx(0.3)


def test_ndarray_rejects_bad_shapes():
    adapter = NDArrayAdapter()
    with pytest.raises(ValueError):
        adapter.rgb_components(np.zeros((2, 3)))
    with pytest.raises(ValueError):
        adapter.rgb_components(np.zeros(5))
    with pytest.raises(ValueError):
        NDArrayAdapter(space="cmyk")
