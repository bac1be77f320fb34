import json
import logging
import shutil
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from sketchsvg.convert import (
    ConversionOptions,
    find_reconstruction_files,
    main,
    run_conversion,
    split_file_name,
)

SAMPLE_FILE = Path(__file__).parent.parent / "test_files" / "12345_abcdef01_0000.json"


@pytest.fixture
def input_dir(tmp_path):
    directory = tmp_path / "reconstruction"
    directory.mkdir()
    shutil.copy(SAMPLE_FILE, directory / SAMPLE_FILE.name)
    (directory / "99999_deadbeef_0001.json").write_text("{not json", encoding="utf-8")
    (directory / "notes.txt").write_text("ignored", encoding="utf-8")
    (directory / "folder.json").mkdir()
    return directory


def test_find_reconstruction_files(input_dir):
    files = find_reconstruction_files(str(input_dir))
    assert [Path(f).name for f in files] == [
        "12345_abcdef01_0000.json",
        "99999_deadbeef_0001.json",
    ]


def test_find_with_name_filter(input_dir):
    files = find_reconstruction_files(str(input_dir), name_filter="abcdef01")
    assert [Path(f).name for f in files] == ["12345_abcdef01_0000.json"]


def test_missing_input_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_reconstruction_files(str(tmp_path / "nope"))


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("20241_6bced5ac_0000.json", ("20241_6bced5ac", "0000")),
        ("/data/part_7.json", ("part", "7")),
        ("plain.json", ("plain", "0")),
    ],
)
def test_split_file_name(file_name, expected):
    assert split_file_name(file_name) == expected


def test_run_conversion(input_dir, tmp_path, caplog):
    output_dir = tmp_path / "output"
    options = ConversionOptions(
        input_dir=str(input_dir), output_dir=str(output_dir), progress=False
    )

    with caplog.at_level(logging.WARNING):
        report = run_conversion(options)

    assert report.files_read == 1
    assert report.files_failed == 1
    assert report.sketches_converted == 2
    assert report.sketches_skipped == 1
    assert sorted(p.name for p in output_dir.iterdir()) == [
        "12345_abcdef01_0000_0.svg",
        "12345_abcdef01_0000_1.svg",
    ]
    root = ET.parse(output_dir / "12345_abcdef01_0000_0.svg").getroot()
    assert len(root.findall("{http://www.w3.org/2000/svg}path")) == 2
    assert "99999_deadbeef_0001.json" in caplog.text


def test_main(input_dir, tmp_path):
    output_dir = tmp_path / "svgs"
    exit_code = main(
        [str(input_dir), str(output_dir), "--filter", "abcdef01", "--dilation", "0", "--no-progress"]
    )

    assert exit_code == 0
    root = ET.parse(output_dir / "12345_abcdef01_0000_1.svg").getroot()
    assert root.attrib["viewBox"] == "0 0 2 0"


def test_main_rejects_missing_directory(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope"), "--no-progress"])


def test_main_rejects_negative_dilation(input_dir):
    with pytest.raises(SystemExit):
        main([str(input_dir), "--dilation", "-1", "--no-progress"])


def test_bad_records_do_not_stop_the_batch(tmp_path, caplog):
    directory = tmp_path / "reconstruction"
    directory.mkdir()
    shutil.copy(SAMPLE_FILE, directory / SAMPLE_FILE.name)
    null_radius = {
        "entities": {
            "broken-sketch": {
                "type": "Sketch",
                "profiles": {
                    "p": {
                        "loops": [
                            {
                                "profile_curves": [
                                    {
                                        "type": "Circle3D",
                                        "center_point": {"x": 0, "y": 0, "z": 0},
                                        "radius": None,
                                    }
                                ]
                            }
                        ]
                    }
                },
            }
        }
    }
    (directory / "20000_aaaaaaaa_0000.json").write_text(json.dumps(null_radius), encoding="utf-8")
    (directory / "30000_bbbbbbbb_0000.json").write_text("[]", encoding="utf-8")
    output_dir = tmp_path / "output"

    with caplog.at_level(logging.WARNING):
        report = run_conversion(
            ConversionOptions(input_dir=str(directory), output_dir=str(output_dir), progress=False)
        )

    assert report.files_read == 2
    assert report.files_failed == 1
    assert report.sketches_converted == 2
    # the NURBS sketch of the sample plus the null-radius sketch
    assert report.sketches_skipped == 2
    assert sorted(p.name for p in output_dir.iterdir()) == [
        "12345_abcdef01_0000_0.svg",
        "12345_abcdef01_0000_1.svg",
    ]
    assert "30000_bbbbbbbb_0000.json" in caplog.text
    assert "broken-sketch" in caplog.text
