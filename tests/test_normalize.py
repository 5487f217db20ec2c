import pytest

from distroid.normalize import (
    DISTRO_RELEASE,
    LSB_RELEASE,
    NORMALIZED_DISTRO_ID,
    NORMALIZED_LSB_ID,
    NORMALIZED_OS_ID,
    OS_RELEASE,
    normalize_id,
)


class TestNormalizeId:

    @pytest.mark.parametrize("raw, expected", [
        ("EnterpriseEnterprise", "oracle"),
        ("RedHatEnterpriseWorkstation", "rhel"),
        ("Ubuntu", "ubuntu"),
    ])
    def test_lsb_table(self, raw, expected):
        assert normalize_id(raw, LSB_RELEASE) == expected

    def test_distro_release_table(self):
        assert normalize_id("redhat", DISTRO_RELEASE) == "rhel"

    def test_os_release_table_has_no_aliases(self):
        assert normalize_id("redhat", OS_RELEASE) == "redhat"

    def test_unknown_id_is_lowered_and_underscored(self):
        assert normalize_id("Arch Linux", LSB_RELEASE) == "arch_linux"

    @pytest.mark.parametrize("source", [OS_RELEASE, LSB_RELEASE, DISTRO_RELEASE])
    def test_unknown_id_is_idempotent(self, source):
        once = normalize_id("Some Distro", source)
        assert normalize_id(once, source) == once

    def test_unknown_source(self):
        with pytest.raises(ValueError):
            normalize_id("ubuntu", "dmesg")

    def test_tables_are_read_only(self):
        for table in (NORMALIZED_OS_ID, NORMALIZED_LSB_ID, NORMALIZED_DISTRO_ID):
            with pytest.raises(TypeError):
                table["x"] = "y"
