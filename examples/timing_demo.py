"""
計時與日誌範例

展示如何使用 verbose=True 來啟用計時日誌，
以及透過 on_timing / on_event 回呼收集建索引與查詢資訊。
"""

from pathlib import Path

from phonopun import PunEngine, enable_timing_logging, load_config

CONFIG_PATH = Path(__file__).parent / "dicts" / "phonopun.json"


def demo_timing_with_verbose():
    """使用 verbose=True 啟用計時"""
    print("=" * 60)
    print("範例 1: 使用 verbose=True 啟用計時")
    print("=" * 60)

    engine = PunEngine(load_config(CONFIG_PATH), verbose=True)
    result = engine.generate("医师")
    print(f"\n結果: { {k: [p.pun for p in v] for k, v in result.items()} }")
    print()


def demo_timing_with_callback():
    """使用 on_timing 回呼收集計時資訊"""
    print("=" * 60)
    print("範例 2: 使用 on_timing 回呼收集計時資訊")
    print("=" * 60)

    timing_data = []

    def collect_timing(operation: str, elapsed: float):
        timing_data.append({
            "operation": operation,
            "elapsed": elapsed
        })

    engine = PunEngine(load_config(CONFIG_PATH), on_timing=collect_timing)

    for word in ["医师", "鱼", "一心"]:
        engine.generate(word)

    print("\n收集到的計時資訊:")
    for item in timing_data:
        print(f"  {item['operation']}: {item['elapsed']:.4f}s")

    generate_times = [
        item['elapsed'] for item in timing_data
        if item['operation'].startswith("PunEngine.generate")
    ]
    if generate_times:
        print(f"\n查詢統計:")
        print(f"  平均耗時: {sum(generate_times) / len(generate_times):.4f}s")
        print(f"  最大耗時: {max(generate_times):.4f}s")
    print(f"\n後端統計: {engine.get_backend_stats()}")
    print()


def demo_load_events():
    """使用 on_event 回呼觀察被略過的紀錄與讀不到的詞庫"""
    print("=" * 60)
    print("範例 3: 載入事件")
    print("=" * 60)

    config = load_config(CONFIG_PATH)
    config.groups[0].dicts[0].path = "missing.json"

    events = []
    PunEngine(config, on_event=events.append)
    for event in events:
        print(f"  {event['type']}: {event.get('source')} {event.get('reason', '')}")
    print()


def demo_enable_timing_logging():
    """只開啟計時日誌"""
    print("=" * 60)
    print("範例 4: enable_timing_logging()")
    print("=" * 60)

    enable_timing_logging()
    engine = PunEngine(load_config(CONFIG_PATH))
    engine.generate("一心")
    print()


if __name__ == "__main__":
    demo_timing_with_verbose()
    demo_timing_with_callback()
    demo_load_events()
    demo_enable_timing_logging()
