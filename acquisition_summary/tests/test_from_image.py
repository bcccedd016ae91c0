from datetime import timedelta
from types import SimpleNamespace
from typing import NamedTuple, Optional

import pytest

from ..dimensions import AxisNames
from ..summary_metadata import SummaryMetadataBuilder


class PhysicalPixelSizes(NamedTuple):
    Z: Optional[float]
    Y: Optional[float]
    X: Optional[float]


@pytest.fixture
def sample_image() -> SimpleNamespace:
    return SimpleNamespace(
        channel_names=["DAPI", "GFP"],
        dims=SimpleNamespace(T=4, C=2, Z=11, Y=512, X=512),
        physical_pixel_sizes=PhysicalPixelSizes(Z=0.5, Y=0.108, X=0.108),
        time_interval=timedelta(seconds=2),
        scenes=("Image:0", "Image:1", "Image:2"),
    )


def test_from_image(sample_image: SimpleNamespace) -> None:
    metadata = SummaryMetadataBuilder.from_image(sample_image).build()
    assert metadata.channel_names == ("DAPI", "GFP")
    assert metadata.z_step_um == 0.5
    assert metadata.wait_interval == 2000.0
    assert metadata.intended_dimensions == {
        AxisNames.Time: 4,
        AxisNames.Channel: 2,
        AxisNames.Z: 11,
        AxisNames.Position: 3,
    }
    assert metadata.file_name is None


def test_from_image_missing_attributes() -> None:
    image = SimpleNamespace(
        dims=SimpleNamespace(C=1, Y=64, X=64),
        physical_pixel_sizes=PhysicalPixelSizes(Z=None, Y=1.0, X=1.0),
        time_interval=None,
    )
    metadata = SummaryMetadataBuilder.from_image(image).build()
    assert metadata.channel_names is None
    assert metadata.z_step_um is None
    assert metadata.wait_interval is None
    assert metadata.intended_dimensions == {AxisNames.Channel: 1}
    assert metadata.present_fields() == ("intended_dimensions",)


def test_from_image_returns_editable_builder(sample_image: SimpleNamespace) -> None:
    metadata = (
        SummaryMetadataBuilder.from_image(sample_image)
        .file_name("exp1.tif")
        .channel_names(["Cy5"])
        .build()
    )
    assert metadata.file_name == "exp1.tif"
    assert metadata.channel_names == ("Cy5",)
