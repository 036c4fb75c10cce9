"""
基本使用範例

從 dicts/phonopun.json 載入詞庫，生成諧音梗。
執行前請先安裝: pip install -e .
"""

from pathlib import Path

from phonopun import PunEngine, load_config

CONFIG_PATH = Path(__file__).parent / "dicts" / "phonopun.json"


def show(result, limit=5):
    for category, puns in result.items():
        print(f"[{category}] 共 {len(puns)} 筆")
        for pun in puns[:limit]:
            marked = "".join(f"[{ch}]" if i in pun.highlights else ch for i, ch in enumerate(pun.pun))
            print(f"  {marked}  <- {' / '.join(pun.origins)}")
    print()


def example_1_unordered():
    """範例 1: 無序比對（預設）"""
    print("=" * 60)
    print("範例 1: 無序比對")
    print("=" * 60)

    engine = PunEngine(load_config(CONFIG_PATH))
    show(engine.generate("鱼"))
    show(engine.generate("医师", ["成语"]))


def example_2_ordered():
    """範例 2: 有序比對，輸入的字必須依序出現"""
    print("=" * 60)
    print("範例 2: 有序比對")
    print("=" * 60)

    engine = PunEngine(load_config(CONFIG_PATH))
    show(engine.generate("一新一衣", ["成语"], ignore_order=False))


def example_3_categories():
    """範例 3: 分類資訊"""
    print("=" * 60)
    print("範例 3: 分類資訊")
    print("=" * 60)

    engine = PunEngine(load_config(CONFIG_PATH))
    print(f"分組: {engine.get_category_map()}")
    print(f"全部分類: {engine.get_all_types_ordered()}")
    print(f"預設勾選: {engine.get_default_selected_types()}")
    print(f"顯示設定: {engine.get_display_settings()}")
    print()


if __name__ == "__main__":
    example_1_unordered()
    example_2_ordered()
    example_3_categories()
