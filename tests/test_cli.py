"""
Tests for the command-line interface, reporting and exporters.
"""

import csv
import json

import numpy as np
import pytest

from imgcollide.cli import main, parse_arguments, format_collision_report, summarize
from imgcollide.models import CollisionGroup, Fingerprint
from imgcollide.utils.exporters import export_results

A = Fingerprint.from_bits(np.array([[1, 0], [0, 1]], dtype=bool))


@pytest.fixture
def groups():
    return [
        CollisionGroup(
            fingerprint=A,
            buckets={(100, 100): ["/photos/a.png", "/photos/b.png"], (50, 50): ["/photos/c.png"]},
        )
    ]


class TestParseArguments:
    """Test parse_arguments function."""

    def test_defaults(self):
        args = parse_arguments(['/photos'])
        assert str(args.path) == '/photos'
        assert args.no_dct is None
        assert args.resolution is None
        assert args.workers is None
        assert args.export_format == 'txt'

    def test_options(self):
        args = parse_arguments(['/photos', '--no-dct', '-r', '16', '-w', '2'])
        assert args.no_dct is True
        assert args.resolution == 16
        assert args.workers == 2

    def test_path_required(self):
        with pytest.raises(SystemExit):
            parse_arguments([])


class TestReporting:
    """Test report formatting."""

    def test_layout(self, groups):
        assert format_collision_report(groups) == (
            "\n"
            "collision:\n"
            "  100 x 100\n"
            "    /photos/a.png\n"
            "    /photos/b.png\n"
            "  50 x 50\n"
            "    /photos/c.png\n"
        )

    def test_empty(self):
        assert format_collision_report([]) == ""

    def test_summarize(self, groups):
        assert summarize(groups) == "1 collision group covering 3 images"
        assert summarize([]) == "0 collision groups covering 0 images"


class TestExportResults:
    """Test export_results function."""

    def test_txt(self, groups, temp_dir):
        out = temp_dir / "out.txt"
        export_results(groups, out, 'txt')
        assert out.read_text(encoding='utf-8') == format_collision_report(groups)

    def test_csv(self, groups, temp_dir):
        out = temp_dir / "out.csv"
        export_results(groups, out, 'csv')
        with open(out, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 3
        assert rows[0] == {
            'group_id': '1', 'fingerprint': '9', 'width': '100', 'height': '100', 'path': '/photos/a.png',
        }
        assert rows[2]['width'] == '50'

    def test_json(self, groups, temp_dir):
        out = temp_dir / "out.json"
        export_results(groups, out, 'json')
        data = json.loads(out.read_text(encoding='utf-8'))
        assert data['group_count'] == 1
        assert data['groups'][0]['image_count'] == 3

    def test_unsupported_format(self, groups, temp_dir):
        with pytest.raises(ValueError):
            export_results(groups, temp_dir / "out.xml", 'xml')


class TestMain:
    """Run the CLI end to end."""

    def test_reports_collisions(self, sample_images, temp_dir, capsys):
        exit_code = main([str(temp_dir), '--no-progress'])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert out.count("collision:") == 1
        assert "  64 x 64" in out
        for name in ('gray1', 'gray2', 'gray3'):
            assert f"    {sample_images[name]}" in out
        assert sample_images['photo'] not in out

    def test_no_collisions(self, temp_dir, capsys):
        assert main([str(temp_dir), '--no-progress']) == 0
        assert capsys.readouterr().out == ""

    def test_missing_directory(self, temp_dir):
        assert main([str(temp_dir / "missing")]) == 1

    def test_invalid_resolution(self, sample_images, temp_dir):
        assert main([str(temp_dir), '-r', '0']) == 1

    def test_invalid_workers(self, sample_images, temp_dir):
        assert main([str(temp_dir), '-w', '0']) == 1

    def test_export(self, sample_images, temp_dir, capsys):
        out = temp_dir / "report.json"
        exit_code = main([str(temp_dir), '--no-progress', '--no-dct', '-r', '8',
                          '--export', str(out), '--export-format', 'json'])
        capsys.readouterr()

        assert exit_code == 0
        data = json.loads(out.read_text(encoding='utf-8'))
        paths = {p for g in data['groups'] for b in g['buckets'] for p in b['paths']}
        assert {sample_images['gray1'], sample_images['gray2'], sample_images['gray3']} <= paths
        assert all(len(g['fingerprint']) == 16 for g in data['groups'])

    def test_large_resolution(self, sample_images, temp_dir, capsys):
        assert main([str(temp_dir), '--no-progress', '-r', '80']) == 0
        assert capsys.readouterr().out.count("collision:") == 1

    def test_unwritable_export(self, sample_images, temp_dir, capsys):
        out = temp_dir / "missing" / "report.json"
        exit_code = main([str(temp_dir), '--no-progress', '--export', str(out), '--export-format', 'json'])
        capsys.readouterr()

        assert exit_code == 1
        assert not out.exists()
