from pathlib import Path

from ..io import split_save_location
from ..summary_metadata import SummaryMetadataBuilder


def test_split_local_path(tmp_path: Path) -> None:
    directory, file_name = split_save_location(tmp_path / "exp1" / "exp1.tif")
    assert file_name == "exp1.tif"
    assert Path(directory) == tmp_path / "exp1"


def test_split_remote_uri_keeps_protocol() -> None:
    directory, file_name = split_save_location("memory://bucket/runs/exp1.tif")
    assert file_name == "exp1.tif"
    assert directory.startswith("memory://")
    assert directory.endswith("bucket/runs")


def test_save_location(tmp_path: Path) -> None:
    metadata = (
        SummaryMetadataBuilder()
        .save_location(str(tmp_path / "exp1_MMStack.ome.tif"))
        .build()
    )
    assert metadata.file_name == "exp1_MMStack.ome.tif"
    assert Path(metadata.directory) == tmp_path  # type: ignore[arg-type]
    assert metadata.present_fields() == ("file_name", "directory")
