#!/usr/bin/env python3
"""
CLI для резюмирования текста и извлечения ключевых слов
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Добавляем src в путь для импортов
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.settings import get_settings
from services.analyzer_service import (
    AnalyzerUnavailableError,
    InvalidAnalysisInput,
    LocalAnalyzer,
    RemoteAnalyzer,
    TASKS,
    clamp_k,
    clamp_top_n,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_UNAVAILABLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Экстрактивное резюме и ключевые слова для текста",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:

  # Резюме из 3 предложений и 8 ключевых слов
  python analyze.py article.txt

  # Текст из stdin, JSON на выходе
  cat notes.txt | python analyze.py -k 5 --top-n 10 --json

  # Через удаленный сервис анализа
  python analyze.py article.txt --mode remote --remote-url http://localhost:3000
        """,
    )
    parser.add_argument("file", nargs="?", help="Файл с текстом (по умолчанию stdin)")
    parser.add_argument("-k", type=int, default=None, help="Предложений в резюме (1-12)")
    parser.add_argument("--top-n", type=int, default=None, help="Ключевых слов (1-20)")
    parser.add_argument("--task", choices=TASKS, default="both", help="Что считать")
    parser.add_argument(
        "--mode", choices=["local", "remote"], default=None, help="Режим анализа"
    )
    parser.add_argument("--remote-url", default=None, help="Адрес удаленного сервиса")
    parser.add_argument("--json", action="store_true", help="Вывод одним JSON объектом")
    parser.add_argument("--verbose", action="store_true", help="Подробные логи в stderr")
    return parser


def read_text(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    settings = get_settings()

    try:
        text = read_text(args.file)
    except OSError as e:
        print(f"Не удалось прочитать файл: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    mode = args.mode or settings.analyzer_mode
    if mode == "remote":
        analyzer = RemoteAnalyzer(
            base_url=args.remote_url or settings.remote_analyzer_url,
            timeout=settings.remote_analyzer_timeout,
            min_text_length=settings.min_text_length,
        )
    else:
        analyzer = LocalAnalyzer(min_text_length=settings.min_text_length)

    k = clamp_k(args.k, settings.default_k, settings.max_k)
    top_n = clamp_top_n(args.top_n, settings.default_top_n, settings.max_top_n)

    try:
        result = analyzer.analyze(text, k=k, top_n=top_n, task=args.task)
    except InvalidAnalysisInput as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except AnalyzerUnavailableError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return EXIT_UNAVAILABLE

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
        return EXIT_OK

    if args.task in ("summary", "both"):
        print("Резюме:")
        for i, sentence in enumerate(result.summary, 1):
            print(f"  {i}. {sentence}")
    if args.task in ("keywords", "both"):
        print("Ключевые слова:")
        for keyword in result.keywords:
            print(f"  - {keyword}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
