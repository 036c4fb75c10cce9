"""
測試詞庫載入器

驗證：
1. 三種格式的正常載入
2. 壞掉的單筆紀錄只略過該筆並發出事件
3. 讀不到的檔案只略過該詞庫
"""

import json
import logging

import pytest

from phonopun.config import DictConfig, GroupConfig, LoaderType, PunConfig
from phonopun.core.types import RawRecord
from phonopun.loaders import load_dict, load_sources


def _write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def pun_config(tmp_path):
    return PunConfig(groups=[], base_dir=tmp_path)


class TestJsonNormal:
    def test_loads_key_and_extra_fields(self, tmp_path, pun_config):
        _write_json(tmp_path / "idiom.json", [
            {"word": "一生一世", "explanation": "一輩子"},
            {"word": "万事如意"},
        ])
        config = DictConfig("成语", "idiom.json", LoaderType.JSON_NORMAL, key_field="word",
                            extra_field="explanation", default_freq=7)

        records = list(load_dict(config, pun_config))

        assert records == [
            RawRecord("一生一世", "成语", "一輩子", 7),
            RawRecord("万事如意", "成语", "", 7),
        ]

    def test_blank_and_missing_text_are_skipped(self, tmp_path, pun_config):
        _write_json(tmp_path / "idiom.json", [{"word": "  "}, {"other": "x"}, {"word": "马到成功"}])
        config = DictConfig("成语", "idiom.json", LoaderType.JSON_NORMAL, key_field="word")

        assert [r.text for r in load_dict(config, pun_config)] == ["马到成功"]

    def test_non_object_entry_emits_event(self, tmp_path, pun_config):
        _write_json(tmp_path / "idiom.json", ["一生一世", {"word": "马到成功"}])
        config = DictConfig("成语", "idiom.json", LoaderType.JSON_NORMAL, key_field="word")
        events = []

        records = list(load_dict(config, pun_config, on_event=events.append))

        assert [r.text for r in records] == ["马到成功"]
        assert events[0]["type"] == "record_skipped"
        assert events[0]["reason"] == "not_an_object"
        assert events[0]["line"] == 0


class TestJsonRiddle:
    def test_answer_is_text_and_riddle_is_annotation(self, tmp_path, pun_config):
        _write_json(tmp_path / "riddle.json", [
            {"riddle": "猪八戒照镜子", "answer": "里外不是人"},
            {"riddle": "", "answer": "缺谜面"},
            {"riddle": "缺谜底", "answer": " "},
        ])
        config = DictConfig("歇后语", "riddle.json", LoaderType.JSON_RIDDLE)

        records = list(load_dict(config, pun_config))

        assert records == [RawRecord("里外不是人", "歇后语", "猪八戒照镜子", 0)]

    def test_custom_fields(self, tmp_path, pun_config):
        _write_json(tmp_path / "riddle.json", [{"q": "谜面", "a": "谜底"}])
        config = DictConfig("歇后语", "riddle.json", LoaderType.JSON_RIDDLE, key_field="a", extra_field="q")

        assert list(load_dict(config, pun_config)) == [RawRecord("谜底", "歇后语", "谜面", 0)]


class TestThuocl:
    def test_parses_lines(self, tmp_path, pun_config):
        (tmp_path / "animal.txt").write_text(
            "熊猫\t1000\n\n 老虎 \t 500 \n猫\t300\n狮子\n长颈鹿\tabc\n大象\t-1\n",
            encoding="utf-8",
        )
        config = DictConfig("动物", "animal.txt", LoaderType.THUOCL)
        events = []

        records = list(load_dict(config, pun_config, on_event=events.append))

        assert records == [
            RawRecord("熊猫", "动物", "", 1000),
            RawRecord("老虎", "动物", "", 500),
        ]
        assert [e["reason"] for e in events] == ["missing_frequency", "invalid_frequency", "invalid_frequency"]
        assert [e["line"] for e in events] == [5, 6, 7]

    def test_skipped_lines_are_logged_as_warnings(self, tmp_path, pun_config, caplog):
        (tmp_path / "animal.txt").write_text("狮子\n熊猫\t10\n", encoding="utf-8")
        config = DictConfig("动物", "animal.txt", LoaderType.THUOCL)

        with caplog.at_level(logging.WARNING, logger="phonopun.loader"):
            records = list(load_dict(config, pun_config))

        assert [r.text for r in records] == ["熊猫"]
        assert any(r.levelno == logging.WARNING and "missing_frequency" in r.getMessage() for r in caplog.records)


class TestSourceFailures:
    def test_missing_file(self, pun_config):
        config = DictConfig("成语", "missing.json", LoaderType.JSON_NORMAL)
        events = []

        assert list(load_dict(config, pun_config, on_event=events.append)) == []
        assert events[0]["type"] == "source_failed"
        assert events[0]["source"] == "成语"

    def test_invalid_json(self, tmp_path, pun_config):
        (tmp_path / "broken.json").write_text("[{", encoding="utf-8")
        config = DictConfig("成语", "broken.json", LoaderType.JSON_NORMAL)
        events = []

        assert list(load_dict(config, pun_config, on_event=events.append)) == []
        assert events[0]["exception_type"] == "JSONDecodeError"

    def test_top_level_must_be_array(self, tmp_path, pun_config):
        _write_json(tmp_path / "obj.json", {"word": "一生"})
        config = DictConfig("成语", "obj.json", LoaderType.JSON_NORMAL)

        assert list(load_dict(config, pun_config)) == []

    def test_failing_handler_does_not_abort(self, pun_config):
        def _boom(event):
            raise RuntimeError("handler failed")

        config = DictConfig("成语", "missing.json", LoaderType.JSON_NORMAL)
        assert list(load_dict(config, pun_config, on_event=_boom)) == []

    def test_dict_without_loader_contributes_nothing(self, pun_config):
        assert list(load_dict(DictConfig("空"), pun_config)) == []


class TestLoadSources:
    def test_loads_in_configuration_order_and_skips_failures(self, tmp_path):
        _write_json(tmp_path / "a.json", [{"word": "一生一世"}])
        (tmp_path / "b.txt").write_text("熊猫\t10\n", encoding="utf-8")
        config = PunConfig(
            base_dir=tmp_path,
            groups=[
                GroupConfig("g1", [DictConfig("B", "b.txt", LoaderType.THUOCL)]),
                GroupConfig("g2", [
                    DictConfig("坏", "missing.json", LoaderType.JSON_NORMAL),
                    DictConfig("A", "a.json", LoaderType.JSON_NORMAL, key_field="word"),
                ]),
            ],
        )

        records = list(load_sources(config))

        assert [(r.category, r.text) for r in records] == [("B", "熊猫"), ("A", "一生一世")]
