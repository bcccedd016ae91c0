import logging
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional, Tuple

from .dimensions import READER_DIMENSION_TO_AXIS, AxisNames
from .exceptions import UnknownSummaryFieldError
from .io import split_save_location
from .metadata_labels import SummaryMetadataLabels
from .types import Coords, PathLike, PropertyMap, StagePosition

###############################################################################

log = logging.getLogger(__name__)

###############################################################################


def _freeze_sequence(value: Optional[Iterable[Any]]) -> Optional[Tuple[Any, ...]]:
    if value is None:
        return None
    return tuple(value)


def _freeze_mapping(value: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    # Read-only mappings (including custom coordinate types) are kept as given
    if value is None or not isinstance(value, MutableMapping):
        return value
    return MappingProxyType(dict(value))


def _deep_freeze(value: Any) -> Any:
    """
    Return a read-only version of plain containers, recursively.

    dicts become MappingProxyType, lists and tuples become tuples and sets
    become frozensets. Any other value is kept by reference.
    """
    if isinstance(value, (dict, MappingProxyType)):
        return MappingProxyType({k: _deep_freeze(v) for k, v in value.items()})
    if isinstance(value, list) or type(value) is tuple:
        return tuple(_deep_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_deep_freeze(v) for v in value)
    return value


def _freeze_user_data(value: Optional[PropertyMap]) -> Optional[PropertyMap]:
    if value is None:
        return None
    return MappingProxyType({k: _deep_freeze(v) for k, v in value.items()})


@dataclass(frozen=True)
class SummaryMetadata:
    """
    Metadata that applies to every image of a dataset, attached once per
    acquisition.

    Instances are immutable. Build them with a SummaryMetadataBuilder, and
    derive modified versions with `copy()` or `replace()`. Every field that was
    not set is None, which is distinct from an empty value such as "" or ().

    Attributes
    ----------
    file_name: Optional[str]
        The complete file name, including any suffix appended by the
        acquisition software.

    prefix: Optional[str]
        The user-supplied portion of the file name, without the appended suffix.

    user_name: Optional[str]
        The signed-in user of the machine that collected the data.

    profile_name: Optional[str]
        The name of the instrument control profile used to collect the data.

    application_version: Optional[str]
        The version of the acquisition application.

    metadata_version: Optional[str]
        The version of the metadata schema when the data was collected.

    computer_name: Optional[str]
        The name of the computer the data was collected on.

    directory: Optional[str]
        The directory the data was originally saved to.

    comments: Optional[str]
        Comments attached to the acquisition as a whole.

    channel_names: Optional[Tuple[str, ...]]
        Names of the channels, in channel index order.

    z_step_um: Optional[float]
        Distance between slices of a volume, in microns.

    wait_interval: Optional[float]
        Time to wait between timepoints, in milliseconds.

    custom_intervals_ms: Optional[Tuple[Optional[float], ...]]
        Per-timepoint wait times when the interval between timepoints varies.

    intended_dimensions: Optional[Coords]
        The expected number of images along each axis. The data actually
        collected may be smaller if the acquisition was aborted. A read-only
        coordinate object is kept as given; a dict is copied into a read-only
        view.

    start_date: Optional[str]
        The date and time at which the acquisition started.

    stage_positions: Optional[Tuple[StagePosition, ...]]
        The stage positions to visit, in visit order.

    user_data: Optional[PropertyMap]
        General purpose user metadata. Nested dicts, lists and sets are frozen
        into read-only views, tuples and frozensets; any other value is kept
        by reference.
    """

    file_name: Optional[str] = None
    prefix: Optional[str] = None
    user_name: Optional[str] = None
    profile_name: Optional[str] = None
    application_version: Optional[str] = None
    metadata_version: Optional[str] = None
    computer_name: Optional[str] = None
    directory: Optional[str] = None
    comments: Optional[str] = None
    channel_names: Optional[Tuple[str, ...]] = None
    z_step_um: Optional[float] = None
    wait_interval: Optional[float] = None
    custom_intervals_ms: Optional[Tuple[Optional[float], ...]] = None
    intended_dimensions: Optional[Coords] = None
    start_date: Optional[str] = None
    stage_positions: Optional[Tuple[StagePosition, ...]] = None
    user_data: Optional[PropertyMap] = None

    # Mapping fields and opaque user values are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # Never alias storage the caller (or a builder) could mutate later
        frozen = {
            "channel_names": _freeze_sequence(self.channel_names),
            "custom_intervals_ms": _freeze_sequence(self.custom_intervals_ms),
            "stage_positions": _freeze_sequence(self.stage_positions),
            "intended_dimensions": _freeze_mapping(self.intended_dimensions),
            "user_data": _freeze_user_data(self.user_data),
        }
        for name, value in frozen.items():
            object.__setattr__(self, name, value)

    def copy(self) -> "SummaryMetadataBuilder":
        """
        Generate a new SummaryMetadataBuilder whose values are initialized to
        the values of this SummaryMetadata.

        The builder is independent: changing it never affects this record.
        """
        return SummaryMetadataBuilder().update(**self._field_values())

    def replace(self, **field_values: Any) -> "SummaryMetadata":
        """Return a new SummaryMetadata with the given fields replaced."""
        return self.copy().update(**field_values).build()

    def present_fields(self) -> Tuple[str, ...]:
        """Names of the fields that are not None, in declaration order."""
        return tuple(
            name for name, value in self._field_values().items() if value is not None
        )

    def to_dict(self) -> dict:
        """
        Convert the metadata into a dictionary using readable labels.

        Returns:
            dict: A mapping where keys are the labels defined in
                  SummaryMetadataLabels, and values are the corresponding
                  metadata values.
        """
        return {
            SummaryMetadataLabels[name.upper()].value: value
            for name, value in self._field_values().items()
        }

    def _field_values(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in FIELD_NAMES}


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(SummaryMetadata))


class SummaryMetadataBuilder:
    """
    Accumulates SummaryMetadata fields, then freezes them with `build()`.

    Every setter returns the builder so calls can be chained, and the last
    value set for a field wins. Sequences and mappings are frozen when set, so
    later changes to the caller's objects are not picked up. A builder may
    keep being used after `build()`; records already built are unaffected.

    Examples
    --------
    >>> metadata = (
    ...     SummaryMetadataBuilder()
    ...     .file_name("exp1.tif")
    ...     .z_step_um(0.5)
    ...     .channel_names(["DAPI", "GFP"])
    ...     .build()
    ... )
    >>> metadata.channel_names
    ('DAPI', 'GFP')
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = dict.fromkeys(FIELD_NAMES)

    def build(self) -> SummaryMetadata:
        """
        Construct a SummaryMetadata from the current values of the builder.
        """
        return SummaryMetadata(**self._values)

    def update(self, **field_values: Any) -> "SummaryMetadataBuilder":
        """
        Set several fields at once by name.

        Raises
        ------
        UnknownSummaryFieldError
            A name is not a SummaryMetadata field. No field is set in that case.
        """
        for name in field_values:
            if name not in self._values:
                raise UnknownSummaryFieldError(name, FIELD_NAMES)

        for name, value in field_values.items():
            getattr(self, name)(value)
        return self

    def file_name(self, file_name: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["file_name"] = file_name
        return self

    def prefix(self, prefix: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["prefix"] = prefix
        return self

    def user_name(self, user_name: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["user_name"] = user_name
        return self

    def profile_name(self, profile_name: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["profile_name"] = profile_name
        return self

    def application_version(
        self, application_version: Optional[str]
    ) -> "SummaryMetadataBuilder":
        self._values["application_version"] = application_version
        return self

    def metadata_version(
        self, metadata_version: Optional[str]
    ) -> "SummaryMetadataBuilder":
        self._values["metadata_version"] = metadata_version
        return self

    def computer_name(self, computer_name: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["computer_name"] = computer_name
        return self

    def directory(self, directory: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["directory"] = directory
        return self

    def comments(self, comments: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["comments"] = comments
        return self

    def channel_names(
        self, channel_names: Optional[Iterable[str]]
    ) -> "SummaryMetadataBuilder":
        self._values["channel_names"] = _freeze_sequence(channel_names)
        return self

    def z_step_um(self, z_step_um: Optional[float]) -> "SummaryMetadataBuilder":
        self._values["z_step_um"] = z_step_um
        return self

    def wait_interval(self, wait_interval: Optional[float]) -> "SummaryMetadataBuilder":
        self._values["wait_interval"] = wait_interval
        return self

    def custom_intervals_ms(
        self, custom_intervals_ms: Optional[Iterable[Optional[float]]]
    ) -> "SummaryMetadataBuilder":
        self._values["custom_intervals_ms"] = _freeze_sequence(custom_intervals_ms)
        return self

    def intended_dimensions(
        self, intended_dimensions: Optional[Coords]
    ) -> "SummaryMetadataBuilder":
        self._values["intended_dimensions"] = _freeze_mapping(intended_dimensions)
        return self

    def start_date(self, start_date: Optional[str]) -> "SummaryMetadataBuilder":
        self._values["start_date"] = start_date
        return self

    def stage_positions(
        self, stage_positions: Optional[Iterable[StagePosition]]
    ) -> "SummaryMetadataBuilder":
        self._values["stage_positions"] = _freeze_sequence(stage_positions)
        return self

    def user_data(self, user_data: Optional[PropertyMap]) -> "SummaryMetadataBuilder":
        self._values["user_data"] = _freeze_user_data(user_data)
        return self

    def save_location(
        self, uri: PathLike, fs_kwargs: Optional[Dict[str, Any]] = None
    ) -> "SummaryMetadataBuilder":
        """
        Set `directory` and `file_name` from the local or remote location the
        dataset is saved to.

        Parameters
        ----------
        uri: PathLike
            The local or remote path or uri of the saved dataset.
        fs_kwargs: Optional[Dict[str, Any]]
            Any specific keyword arguments to pass down to the fsspec created
            filesystem.
        """
        directory, file_name = split_save_location(uri, fs_kwargs=fs_kwargs)
        return self.directory(directory).file_name(file_name)

    @classmethod
    def from_image(cls, image: Any) -> "SummaryMetadataBuilder":
        """
        Create a SummaryMetadataBuilder seeded with values from an image reader.

        Fills channel_names, z_step_um, wait_interval and intended_dimensions
        from the reader's channel_names, physical_pixel_sizes, time_interval,
        dims and scenes. Anything the reader does not provide stays unset.
        """
        builder = cls()

        channel_names = getattr(image, "channel_names", None)
        if channel_names is not None:
            builder.channel_names(channel_names)

        physical_pixel_sizes = getattr(image, "physical_pixel_sizes", None)
        if physical_pixel_sizes is not None:
            builder.z_step_um(physical_pixel_sizes.Z)

        time_interval = getattr(image, "time_interval", None)
        if time_interval is not None:
            builder.wait_interval(time_interval.total_seconds() * 1000)

        intended_dimensions = {}
        dims = getattr(image, "dims", None)
        if dims is not None:
            for dim, axis in READER_DIMENSION_TO_AXIS.items():
                size = getattr(dims, dim, None)
                if size is not None:
                    intended_dimensions[axis] = size
        scenes = getattr(image, "scenes", None)
        if scenes is not None:
            intended_dimensions[AxisNames.Position] = len(scenes)
        if intended_dimensions:
            builder.intended_dimensions(intended_dimensions)

        log.debug(
            f"Seeded summary metadata from {type(image).__name__}, "
            f"unset fields: {[k for k, v in builder._values.items() if v is None]}"
        )
        return builder
