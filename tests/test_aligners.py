"""
測試比對策略

驗證：
1. 無序比對的貪心認領與不重複使用位置
2. 有序比對的跳字、起點選擇與連貫加分
3. 多音字以交集比對
4. 標點等無讀音位置不參與比對，替換位置仍對應原文
"""

import pytest

from phonopun.core.protocols import AlignerProtocol
from phonopun.matching.aligners import (
    OrderedAligner,
    UnorderedAligner,
    apply_substitutions,
    get_aligner,
)


class TestApplySubstitutions:
    def test_replaces_positions(self):
        assert apply_substitutions("一生一世", {0: "已", 3: "事"}) == "已生一事"

    def test_empty_replacements_returns_original(self):
        assert apply_substitutions("一生一世", {}) == "一生一世"

    def test_out_of_range_is_ignored(self):
        assert apply_substitutions("一生", {5: "X", -1: "Y"}) == "一生"


class TestUnorderedAligner:
    """無序比對"""

    def setup_method(self):
        self.aligner = UnorderedAligner()

    def test_basic_match(self, make_item, make_query):
        match = self.aligner.align(make_query("已生"), make_item("一生一世"), 2)

        assert match.final_text == "已生一世"
        assert match.indices == (0, 1)
        assert match.match_count == 2
        assert match.score == 20

    def test_order_is_ignored(self, make_item, make_query):
        match = self.aligner.align(make_query("事衣"), make_item("一生一世"), 2)

        assert match.final_text == "衣生一事"
        assert match.indices == (0, 3)

    def test_never_reuses_a_position(self, make_item, make_query):
        """兩個輸入字元讀音相同時，第二個只能認領下一個可用位置"""
        assert self.aligner.align(make_query("一衣"), make_item("一生"), 2) is None

        match = self.aligner.align(make_query("医衣"), make_item("一生一世"), 2)
        assert match.indices == (0, 2)
        assert match.final_text == "医生衣世"
        assert len(set(match.indices)) == len(match.indices)

    def test_below_min_limit_returns_none(self, make_item, make_query):
        assert self.aligner.align(make_query("已马"), make_item("一生一世"), 2) is None

    def test_no_adjacency_bonus(self, make_item, make_query):
        match = self.aligner.align(make_query("医生是妈"), make_item("一生到十"), 2)

        assert match.match_count == 3
        assert match.score == 30

    def test_two_non_adjacent_keys(self, make_item, make_query):
        """4 字輸入、最低 2 字：共享 2 個不相鄰讀音的詞條得 20 分並通過"""
        match = self.aligner.align(make_query("医生是妈"), make_item("一到马道"), 2)

        assert match.indices == (0, 2)
        assert match.score == 20
        assert match.final_text == "医到妈道"

    def test_polyphone_intersects(self, make_item, make_query):
        """行 (xing/hang) 可同時與 型、航 比對"""
        assert self.aligner.align(make_query("航"), make_item("行"), 1).final_text == "航"
        assert self.aligner.align(make_query("型"), make_item("行"), 1).final_text == "型"

    def test_punctuation_positions_are_skipped(self, make_item, make_query):
        match = self.aligner.align(make_query("衣事"), make_item("一生，一世"), 2)

        assert match.indices == (0, 4)
        assert match.final_text == "衣生，一事"


class TestOrderedAligner:
    """有序比對"""

    def setup_method(self):
        self.aligner = OrderedAligner()

    def test_adjacency_bonus(self, make_item, make_query):
        """3 個匹配、其中一對相鄰：30 + 20 = 50"""
        match = self.aligner.align(make_query("医生是妈"), make_item("一生到十"), 2)

        assert match.indices == (0, 1, 3)
        assert match.score == 50
        assert match.final_text == "医生到是"

    def test_skips_dictionary_characters(self, make_item, make_query):
        match = self.aligner.align(make_query("衣事"), make_item("一生一世"), 2)

        assert match.indices == (0, 3)
        assert match.score == 20
        assert match.final_text == "衣生一事"

    def test_skips_input_prefix(self, make_item, make_query):
        match = self.aligner.align(make_query("马一生"), make_item("一生一世"), 2)

        assert match.indices == (0, 1)
        assert match.score == 40

    def test_order_matters(self, make_item, make_query):
        """世 在 一 之前時，有序比對只能取到一個字"""
        assert self.aligner.align(make_query("世生"), make_item("生世"), 2) is None
        assert UnorderedAligner().align(make_query("世生"), make_item("生世"), 2) is not None

    def test_best_start_prefers_more_matches(self, make_item, make_query):
        """
        起點 0 的 世 吃掉詞條尾端，後面都匹配不到；
        起點 1 從 一 開始可以匹配 3 個字
        """
        match = self.aligner.align(make_query("世一生是"), make_item("一生一世"), 2)

        assert match.match_count == 3
        assert match.indices == (0, 1, 3)
        assert match.final_text == "一生一是"

    def test_below_min_limit_returns_none(self, make_item, make_query):
        assert self.aligner.align(make_query("世"), make_item("一生"), 1) is None


class TestProperties:
    @pytest.mark.parametrize("ignore_order", [True, False])
    def test_reversibility(self, make_item, make_query, ignore_order):
        """把原字寫回被替換的位置，應還原詞條原文"""
        item = make_item("一生，一世")
        match = get_aligner(ignore_order).align(make_query("医事"), item, 2)

        restored = apply_substitutions(match.final_text, {i: item.text[i] for i in match.indices})
        assert restored == item.text

    @pytest.mark.parametrize("ignore_order", [True, False])
    def test_match_count_reaches_min_limit(self, make_item, make_query, ignore_order):
        aligner = get_aligner(ignore_order)
        for text in ["一生一世", "万事如意", "心想事成", "马到成功"]:
            match = aligner.align(make_query("一世成功"), make_item(text), 2)
            if match is not None:
                assert match.match_count >= 2
                assert list(match.indices) == sorted(match.indices)

    def test_aligners_satisfy_protocol(self):
        assert isinstance(OrderedAligner(), AlignerProtocol)
        assert isinstance(UnorderedAligner(), AlignerProtocol)

    def test_get_aligner(self):
        assert isinstance(get_aligner(True), UnorderedAligner)
        assert isinstance(get_aligner(False), OrderedAligner)
