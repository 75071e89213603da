"""顺序重命名冲突规避测试"""

import pytest

from brf.models import RenameCounter
from brf.resolver import TooManyCollisionsError, resolve_sequential_target


class TestResolveSequentialTarget:
    def test_free_name_keeps_counter(self, tmp_path):
        counter = RenameCounter()

        target = resolve_sequential_target(tmp_path, "img", ".jpg", counter)

        assert target == tmp_path / "img_0.jpg"
        assert counter.value == 0

    def test_skips_existing_names(self, tmp_path, make_files):
        make_files("img_0.jpg", "img_1.jpg", "img_3.jpg")
        counter = RenameCounter()

        target = resolve_sequential_target(tmp_path, "img", ".jpg", counter)

        assert target == tmp_path / "img_2.jpg"
        assert counter.value == 2

    def test_other_extension_does_not_collide(self, tmp_path, make_files):
        make_files("img_0.png")

        target = resolve_sequential_target(tmp_path, "img", ".jpg", RenameCounter())

        assert target == tmp_path / "img_0.jpg"

    def test_directory_counts_as_taken(self, tmp_path):
        (tmp_path / "img_0").mkdir()

        target = resolve_sequential_target(tmp_path, "img", "", RenameCounter())

        assert target == tmp_path / "img_1"

    def test_max_probes(self, tmp_path, make_files):
        make_files("img_0.jpg", "img_1.jpg", "img_2.jpg")

        with pytest.raises(TooManyCollisionsError) as exc_info:
            resolve_sequential_target(
                tmp_path, "img", ".jpg", RenameCounter(), max_probes=3
            )
        assert exc_info.value.attempts == 3
