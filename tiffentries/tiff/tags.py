"""Tag ids, names, and the semantic group each tag belongs to.

Every tag sits in at most one group: the main image directory (IFD0),
the EXIF sub-directory, or the GPS sub-directory.  Tags that appear in
none of the tables (vendor-private tags, for instance) classify as
``ExifPart.NONE``.
"""

from enum import Enum
from typing import Callable, Dict, FrozenSet


class ExifPart(Enum):
    NONE = 'none'
    IFD_TAGS = 'ifd'
    EXIF_TAGS = 'exif'
    GPS_TAGS = 'gps'


# Tags written by the encoder itself
IMAGE_WIDTH = 256
IMAGE_LENGTH = 257
BITS_PER_SAMPLE = 258
COMPRESSION = 259
PHOTOMETRIC_INTERPRETATION = 262
SAMPLES_PER_PIXEL = 277
X_RESOLUTION = 282
Y_RESOLUTION = 283
RESOLUTION_UNIT = 296
SOFTWARE = 305
PREDICTOR = 317
XMP = 700
COPYRIGHT = 33432

# EXIF/GPS sub-IFD pointer tags
EXIF_IFD_POINTER_TAG = 34665
GPS_IFD_POINTER_TAG = 34853

# Main image directory tags
IFD_TAG_NAMES: Dict[int, str] = {
    254: 'NewSubfileType', 255: 'SubfileType',
    256: 'ImageWidth', 257: 'ImageLength', 258: 'BitsPerSample',
    259: 'Compression', 262: 'PhotometricInterpretation',
    263: 'Threshholding', 264: 'CellWidth', 265: 'CellLength',
    266: 'FillOrder', 269: 'DocumentName', 270: 'ImageDescription',
    271: 'Make', 272: 'Model', 273: 'StripOffsets', 274: 'Orientation',
    277: 'SamplesPerPixel', 278: 'RowsPerStrip', 279: 'StripByteCounts',
    280: 'MinSampleValue', 281: 'MaxSampleValue',
    282: 'XResolution', 283: 'YResolution', 284: 'PlanarConfiguration',
    285: 'PageName', 286: 'XPosition', 287: 'YPosition',
    288: 'FreeOffsets', 289: 'FreeByteCounts',
    290: 'GrayResponseUnit', 291: 'GrayResponseCurve',
    292: 'T4Options', 293: 'T6Options',
    296: 'ResolutionUnit', 297: 'PageNumber', 301: 'TransferFunction',
    305: 'Software', 306: 'DateTime', 315: 'Artist', 316: 'HostComputer',
    317: 'Predictor', 318: 'WhitePoint', 319: 'PrimaryChromaticities',
    320: 'ColorMap', 321: 'HalftoneHints', 322: 'TileWidth',
    323: 'TileLength', 324: 'TileOffsets', 325: 'TileByteCounts',
    330: 'SubIFDs', 332: 'InkSet', 333: 'InkNames', 334: 'NumberOfInks',
    336: 'DotRange', 337: 'TargetPrinter', 338: 'ExtraSamples',
    339: 'SampleFormat', 340: 'SMinSampleValue', 341: 'SMaxSampleValue',
    342: 'TransferRange', 343: 'ClipPath',
    344: 'XClipPathUnits', 345: 'YClipPathUnits', 346: 'Indexed',
    347: 'JPEGTables', 351: 'OPIProxy',
    512: 'JPEGProc', 513: 'JPEGInterchangeFormat',
    514: 'JPEGInterchangeFormatLength', 515: 'JPEGRestartInterval',
    517: 'JPEGLosslessPredictors', 518: 'JPEGPointTransforms',
    519: 'JPEGQTables', 520: 'JPEGDCTables', 521: 'JPEGACTables',
    529: 'YCbCrCoefficients', 530: 'YCbCrSubsampling',
    531: 'YCbCrPositioning', 532: 'ReferenceBlackWhite',
    700: 'XMP', 18246: 'Rating', 18249: 'RatingPercent',
    32781: 'ImageID', 33421: 'CFARepeatPatternDim', 33422: 'CFAPattern2',
    33423: 'BatteryLevel', 33432: 'Copyright',
    33445: 'MDFileTag', 33446: 'MDScalePixel', 33447: 'MDColorTable',
    33448: 'MDLabName', 33449: 'MDSampleInfo', 33450: 'MDPrepDate',
    33451: 'MDPrepTime', 33452: 'MDFileUnits',
    33550: 'PixelScale', 33723: 'IPTC', 33922: 'IntergraphPacketData',
    34118: 'SEMInfo', 34264: 'ModelTransform', 34377: 'ImageResources',
    34665: 'ExifIFDPointer', 34675: 'ICCProfile',
    34853: 'GPSIFDPointer', 37398: 'TIFFEPStandardID',
    37399: 'SensingMethod2',
    40091: 'XPTitle', 40092: 'XPComment', 40093: 'XPAuthor',
    40094: 'XPKeywords', 40095: 'XPSubject',
    50341: 'PrintIM', 50706: 'DNGVersion', 50707: 'DNGBackwardVersion',
    50708: 'UniqueCameraModel',
}

# EXIF sub-IFD tags (exposure and camera settings)
EXIF_TAG_NAMES: Dict[int, str] = {
    33434: 'ExposureTime', 33437: 'FNumber', 34850: 'ExposureProgram',
    34852: 'SpectralSensitivity', 34855: 'ISOSpeedRatings', 34856: 'OECF',
    34864: 'SensitivityType', 34865: 'StandardOutputSensitivity',
    34866: 'RecommendedExposureIndex', 34867: 'ISOSpeed',
    34868: 'ISOSpeedLatitudeyyy', 34869: 'ISOSpeedLatitudezzz',
    36864: 'ExifVersion', 36867: 'DateTimeOriginal',
    36868: 'DateTimeDigitized', 36880: 'OffsetTime',
    36881: 'OffsetTimeOriginal', 36882: 'OffsetTimeDigitized',
    37121: 'ComponentsConfiguration', 37122: 'CompressedBitsPerPixel',
    37377: 'ShutterSpeedValue', 37378: 'ApertureValue',
    37379: 'BrightnessValue', 37380: 'ExposureBiasValue',
    37381: 'MaxApertureValue', 37382: 'SubjectDistance',
    37383: 'MeteringMode', 37384: 'LightSource', 37385: 'Flash',
    37386: 'FocalLength', 37396: 'SubjectArea', 37500: 'MakerNote',
    37510: 'UserComment', 37520: 'SubsecTime',
    37521: 'SubsecTimeOriginal', 37522: 'SubsecTimeDigitized',
    37888: 'Temperature', 37889: 'Humidity', 37890: 'Pressure',
    37891: 'WaterDepth', 37892: 'Acceleration',
    37893: 'CameraElevationAngle',
    40960: 'FlashpixVersion', 40961: 'ColorSpace',
    40962: 'PixelXDimension', 40963: 'PixelYDimension',
    40964: 'RelatedSoundFile', 40965: 'InteroperabilityIFDPointer',
    41483: 'FlashEnergy', 41484: 'SpatialFrequencyResponse',
    41486: 'FocalPlaneXResolution', 41487: 'FocalPlaneYResolution',
    41488: 'FocalPlaneResolutionUnit', 41492: 'SubjectLocation',
    41493: 'ExposureIndex', 41495: 'SensingMethod',
    41728: 'FileSource', 41729: 'SceneType', 41730: 'CFAPattern',
    41985: 'CustomRendered', 41986: 'ExposureMode', 41987: 'WhiteBalance',
    41988: 'DigitalZoomRatio', 41989: 'FocalLengthIn35mmFilm',
    41990: 'SceneCaptureType', 41991: 'GainControl', 41992: 'Contrast',
    41993: 'Saturation', 41994: 'Sharpness',
    41995: 'DeviceSettingDescription', 41996: 'SubjectDistanceRange',
    42016: 'ImageUniqueID', 42032: 'OwnerName',
    42033: 'SerialNumber', 42034: 'LensInfo', 42035: 'LensMake',
    42036: 'LensModel', 42037: 'LensSerialNumber',
    42080: 'CompositeImage', 42240: 'Gamma',
}

# GPS tag names (tags 0-31)
GPS_TAG_NAMES: Dict[int, str] = {
    0: 'GPSVersionID', 1: 'GPSLatitudeRef', 2: 'GPSLatitude',
    3: 'GPSLongitudeRef', 4: 'GPSLongitude', 5: 'GPSAltitudeRef',
    6: 'GPSAltitude', 7: 'GPSTimeStamp', 8: 'GPSSatellites',
    9: 'GPSStatus', 10: 'GPSMeasureMode', 11: 'GPSDOP',
    12: 'GPSSpeedRef', 13: 'GPSSpeed', 14: 'GPSTrackRef',
    15: 'GPSTrack', 16: 'GPSImgDirectionRef', 17: 'GPSImgDirection',
    18: 'GPSMapDatum', 19: 'GPSDestLatitudeRef', 20: 'GPSDestLatitude',
    21: 'GPSDestLongitudeRef', 22: 'GPSDestLongitude', 23: 'GPSDestBearingRef',
    24: 'GPSDestBearing', 25: 'GPSDestDistanceRef', 26: 'GPSDestDistance',
    27: 'GPSProcessingMethod', 28: 'GPSAreaInformation', 29: 'GPSDateStamp',
    30: 'GPSDifferential', 31: 'GPSHPositioningError',
}

TAG_NAMES: Dict[int, str] = {**GPS_TAG_NAMES, **IFD_TAG_NAMES, **EXIF_TAG_NAMES}

# Descriptive and administrative IFD0 tags carried over into re-encoded files
PRESERVED_METADATA_TAGS: FrozenSet[int] = frozenset({
    269,    # DocumentName
    270,    # ImageDescription
    271,    # Make
    272,    # Model
    305,    # Software
    306,    # DateTime
    315,    # Artist
    316,    # HostComputer
    337,    # TargetPrinter
    700,    # XMP
    18246,  # Rating
    18249,  # RatingPercent
    32781,  # ImageID
    33432,  # Copyright
    33448,  # MDLabName
    33449,  # MDSampleInfo
    33450,  # MDPrepDate
    33451,  # MDPrepTime
    33452,  # MDFileUnits
    34118,  # SEMInfo
    40091,  # XPTitle
    40092,  # XPComment
    40093,  # XPAuthor
    40094,  # XPKeywords
    40095,  # XPSubject
})

TagClassifier = Callable[[int], ExifPart]


def tag_name(tag: int) -> str:
    return TAG_NAMES.get(tag, f'Tag_{tag}')


def classify_tag(tag: int) -> ExifPart:
    """Return the directory group a tag belongs to."""
    if tag in IFD_TAG_NAMES:
        return ExifPart.IFD_TAGS
    if tag in EXIF_TAG_NAMES:
        return ExifPart.EXIF_TAGS
    if tag in GPS_TAG_NAMES:
        return ExifPart.GPS_TAGS
    return ExifPart.NONE


def is_preserved_tag(tag: int) -> bool:
    return tag in PRESERVED_METADATA_TAGS
