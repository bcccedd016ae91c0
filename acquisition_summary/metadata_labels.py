from enum import Enum, unique


@unique
class SummaryMetadataLabels(Enum):
    FILE_NAME = "File Name"
    PREFIX = "Prefix"
    USER_NAME = "User Name"
    PROFILE_NAME = "Profile Name"
    APPLICATION_VERSION = "Application Version"
    METADATA_VERSION = "Metadata Version"
    COMPUTER_NAME = "Computer Name"
    DIRECTORY = "Directory"
    COMMENTS = "Comments"
    CHANNEL_NAMES = "Channel Names"
    Z_STEP_UM = "Z Step (um)"
    WAIT_INTERVAL = "Wait Interval"
    CUSTOM_INTERVALS_MS = "Custom Intervals (ms)"
    INTENDED_DIMENSIONS = "Intended Dimensions"
    START_DATE = "Start Date"
    STAGE_POSITIONS = "Stage Positions"
    USER_DATA = "User Data"
