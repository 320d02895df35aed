"""Tests for tag names, classification and the preservation allow-list."""

import pytest

from tiffentries.tiff.tags import (
    EXIF_TAG_NAMES,
    GPS_TAG_NAMES,
    IFD_TAG_NAMES,
    PRESERVED_METADATA_TAGS,
    ExifPart,
    classify_tag,
    is_preserved_tag,
    tag_name,
)


class TestClassify:
    @pytest.mark.parametrize('tag, part', [
        (256, ExifPart.IFD_TAGS),
        (33432, ExifPart.IFD_TAGS),
        (40091, ExifPart.IFD_TAGS),
        (33434, ExifPart.EXIF_TAGS),
        (36867, ExifPart.EXIF_TAGS),
        (42016, ExifPart.EXIF_TAGS),
        (0, ExifPart.GPS_TAGS),
        (31, ExifPart.GPS_TAGS),
        (65000, ExifPart.NONE),
    ])
    def test_groups(self, tag, part):
        assert classify_tag(tag) == part

    def test_groups_are_disjoint(self):
        assert not set(IFD_TAG_NAMES) & set(EXIF_TAG_NAMES)
        assert not set(IFD_TAG_NAMES) & set(GPS_TAG_NAMES)
        assert not set(EXIF_TAG_NAMES) & set(GPS_TAG_NAMES)


class TestAllowList:
    def test_all_preserved_tags_are_ifd_tags(self):
        for tag in PRESERVED_METADATA_TAGS:
            assert classify_tag(tag) == ExifPart.IFD_TAGS

    @pytest.mark.parametrize('tag', [269, 270, 271, 272, 305, 306, 315, 316, 337,
                                     700, 18246, 18249, 32781, 33432, 34118,
                                     40091, 40092, 40093, 40094, 40095])
    def test_preserved(self, tag):
        assert is_preserved_tag(tag)

    @pytest.mark.parametrize('tag', [256, 258, 273, 274, 330, 34665, 34853])
    def test_not_preserved(self, tag):
        assert not is_preserved_tag(tag)


class TestNames:
    def test_known(self):
        assert tag_name(33432) == 'Copyright'
        assert tag_name(2) == 'GPSLatitude'

    def test_unknown(self):
        assert tag_name(65000) == 'Tag_65000'
