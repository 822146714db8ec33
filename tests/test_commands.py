import json

import pytest

import builders
from flacmeta.__main__ import main


def test_show(sample_path, capsys):
    main(['show', str(sample_path)])
    out = capsys.readouterr().out
    assert 'sample rate:     88200 Hz' in out
    assert 'channels:        2' in out
    assert 'md5:             29499b5e67ae77df6f8491329c4deb93' in out
    assert 'SEEKTABLE (22) 1 seek points' in out
    assert 'PADDING (7600) 7596 bytes' in out


def test_show_json(sample_path, capsys):
    main(['show', '--json', str(sample_path)])
    data = json.loads(capsys.readouterr().out)
    assert data['marker'] == 'fLaC'
    assert data['stream_info']['bits_per_sample'] == 24
    assert data['stream_info']['total_samples'] == 793287
    assert [b['type'] for b in data['blocks']] == [
        'SEEKTABLE', 'APPLICATION', 'VORBIS_COMMENT', 'CUESHEET', 'PICTURE', 'PADDING']
    assert data['blocks'][-1]['last']


def test_show_verbose(sample_path, capsys):
    main(['show', '-v', str(sample_path)])
    err = capsys.readouterr().err
    assert 'read STREAMINFO block: 34 bytes' in err
    assert 'read PADDING block: 7596 bytes (last)' in err


def test_tags(sample_path, capsys):
    main(['tags', str(sample_path)])
    out = capsys.readouterr().out
    assert out.splitlines() == ['vendor: reference libFLAC 1.1.4 20070213', 'example=fish']


def test_tags_json(sample_path, capsys):
    main(['tags', str(sample_path), '--json'])
    assert json.loads(capsys.readouterr().out) == {
        'vendor': 'reference libFLAC 1.1.4 20070213',
        'comments': {'example': ['fish']},
    }


def test_tags_missing(tmp_path, capsys):
    path = tmp_path / 'bare.flac'
    path.write_bytes(builders.flac(builders.block(0, builders.stream_info(), last=True)))
    with pytest.raises(SystemExit) as e:
        main(['tags', str(path)])
    assert e.value.code == 1
    assert 'No VORBIS_COMMENT block' in capsys.readouterr().err


def test_picture(sample_path, tmp_path, capsys):
    out = tmp_path / 'cover.jpg'
    main(['picture', str(sample_path), str(out)])
    assert out.read_bytes() == builders.JPEG
    assert 'FrontCover image/jpeg' in capsys.readouterr().out


def test_picture_index_out_of_range(sample_path, tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main(['picture', '--index', '1', str(sample_path), str(tmp_path / 'x')])
    assert e.value.code == 1
    assert 'No picture #1' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main(['show', str(tmp_path / 'nope.flac')])
    assert e.value.code == 1
    assert 'File does not exist' in capsys.readouterr().err


def test_not_a_flac(tmp_path, capsys):
    path = tmp_path / 'song.flac'
    path.write_bytes(b'ID3\x03\x00' + b'\x00' * 32)
    with pytest.raises(SystemExit) as e:
        main(['show', str(path)])
    assert e.value.code == 1
    assert 'BadMarker' in capsys.readouterr().err
