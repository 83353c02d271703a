#!/usr/bin/env python3
"""
Generate syllogism quiz datasets.

Produces rendered quizzes together with their symbolic premises, so a
dataset can be used both for quiz UIs and for evaluating reasoning.

Usage:
    # Single-answer quizzes in English
    python generate_quiz_dataset.py --mode single --samples 500

    # Multi-answer quizzes in German
    python generate_quiz_dataset.py --mode multi --lang de --samples 200

    # Custom settings
    python generate_quiz_dataset.py --mode multi --config quiz.yaml --show-sample

Output format (JSONL):
{
  "id": 0,
  "mode": "single",
  "lang": "en",
  "pattern": "chain",
  "premises": ["all(X, Y)", "all(Y, Z)"],
  "quiz": {"baseSentences": [...], "answers": [{"sentence": "...", "isCorrect": true}, ...]},
  "metadata": {"terms": {"X": "...", ...}, "num_answers": 5, "num_correct": 1, "seed": 42}
}
"""
import argparse
import json
import logging
from collections import Counter
from typing import Any, Dict, List

from tqdm import tqdm

from syllogism.errors import QuizError
from syllogism.generator import MULTI, SINGLE, Quiz, QuizConfig, QuizGenerator, build_generator


def quiz_to_sample(quiz: Quiz, sample_id: int, seed: int) -> Dict[str, Any]:
    """Flatten a quiz into a dataset record."""
    return {
        "id": sample_id,
        "mode": quiz.mode,
        "lang": quiz.lang,
        "pattern": quiz.template.pattern.value,
        "premises": [str(p) for p in quiz.template.premises],
        "quiz": quiz.to_dict(),
        "metadata": {
            "terms": quiz.terms,
            "canonical": [str(c) for c in quiz.template.correct],
            "answers": [str(a.statement) for a in quiz.answers],
            "num_answers": len(quiz.answers),
            "num_correct": len(quiz.correct_answers),
            "seed": seed,
        },
    }


def generate_dataset(
    generator: QuizGenerator,
    num_samples: int,
    lang: str,
    mode: str,
    seed: int,
    verbose: bool = True,
) -> List[Dict[str, Any]]:
    """
    Generate a dataset of quizzes.

    Args:
        generator: Configured quiz generator
        num_samples: Number of quizzes to generate
        lang: Language code
        mode: "single" or "multi"
        seed: Seed recorded in each sample's metadata
        verbose: Show a progress bar

    Returns:
        List of sample dicts
    """
    samples = []
    for sample_id in tqdm(range(num_samples), desc="Generating", disable=not verbose):
        quiz = generator.generate(lang, mode)
        samples.append(quiz_to_sample(quiz, sample_id, seed))
    return samples


def save_dataset(samples: List[Dict[str, Any]], output_path: str, format: str = "jsonl"):
    """Save dataset to file."""
    if format == "jsonl":
        with open(output_path, 'w', encoding="utf-8") as f:
            for sample in samples:
                f.write(json.dumps(sample, ensure_ascii=False) + "\n")
    else:  # json
        with open(output_path, 'w', encoding="utf-8") as f:
            json.dump(samples, f, indent=2, ensure_ascii=False)


def print_sample(sample: Dict[str, Any]):
    """Print a sample for inspection."""
    print("\n" + "=" * 60)
    print(f"SAMPLE {sample['id']} ({sample['mode']}, {sample['lang']}, {sample['pattern']})")
    print("=" * 60)

    print("\n[PREMISES]")
    for symbolic, sentence in zip(sample["premises"], sample["quiz"]["baseSentences"]):
        print(f"  {symbolic:<20} {sentence}")

    print("\n[ANSWERS]")
    for symbolic, answer in zip(sample["metadata"]["answers"], sample["quiz"]["answers"]):
        mark = "x" if answer["isCorrect"] else " "
        print(f"  [{mark}] {symbolic:<20} {answer['sentence']}")

    print("\n[METADATA]")
    print(f"  Terms: {sample['metadata']['terms']}")
    print(f"  Canonical: {sample['metadata']['canonical']}")


def summarize(dataset: List[Dict[str, Any]]) -> Dict[str, Counter]:
    """Pattern, correct-count and answer-count distributions."""
    return {
        "patterns": Counter(s["pattern"] for s in dataset),
        "num_correct": Counter(s["metadata"]["num_correct"] for s in dataset),
        "num_answers": Counter(s["metadata"]["num_answers"] for s in dataset),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate syllogism quiz datasets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single-answer quizzes
  python generate_quiz_dataset.py --mode single --samples 500

  # Multi-answer quizzes in German
  python generate_quiz_dataset.py --mode multi --lang de --samples 200
        """
    )

    parser.add_argument("--samples", "-n", type=int, default=100,
                        help="Number of quizzes to generate (default: 100)")
    parser.add_argument("--mode", "-m", type=str, default=SINGLE,
                        choices=[SINGLE, MULTI],
                        help="Quiz mode (default: single)")
    parser.add_argument("--lang", "-l", type=str, default="en",
                        help="Language code (default: en)")
    parser.add_argument("--seed", "-s", type=int, default=42,
                        help="Random seed (default: 42)")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Output file path (auto-generated if not specified)")
    parser.add_argument("--format", type=str, default="jsonl",
                        choices=["jsonl", "json"],
                        help="Output format (default: jsonl)")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="YAML file with generator settings")
    parser.add_argument("--templates", type=str, default=None,
                        help="Template library JSON (default: bundled)")
    parser.add_argument("--i18n", type=str, default=None,
                        help="Directory of translation YAML files (default: bundled)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Suppress progress output")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--show-sample", action="store_true",
                        help="Show a sample after generation")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = QuizConfig.from_yaml(args.config) if args.config else QuizConfig()
        generator = build_generator(args.templates, args.i18n, config, seed=args.seed)
        generator.localization.require_language(args.lang)
    except QuizError as e:
        parser.error(str(e))

    if args.output is None:
        args.output = f"syllogism_{args.mode}_{args.lang}.{args.format}"

    if not args.quiet:
        print(f"Generating {args.samples} {args.mode}-answer quizzes...")
        print(f"  Language: {args.lang}")
        print(f"  Templates: {len(generator.library)}")
        print(f"  Seed: {args.seed}")
        print(f"  Output: {args.output}")
        print()

    dataset = generate_dataset(
        generator,
        num_samples=args.samples,
        lang=args.lang,
        mode=args.mode,
        seed=args.seed,
        verbose=not args.quiet,
    )

    save_dataset(dataset, args.output, args.format)

    if not args.quiet:
        print(f"\nGenerated {len(dataset)} quizzes. Saved to {args.output}")

    if args.show_sample and dataset:
        print_sample(dataset[0])

    if not args.quiet and dataset:
        stats = summarize(dataset)
        print("\n" + "=" * 60)
        print("DATASET STATISTICS")
        print("=" * 60)

        print("\nPattern distribution:")
        for pattern, count in sorted(stats["patterns"].items()):
            print(f"  {pattern}: {count}")

        print("\nCorrect answers per quiz:")
        for n, count in sorted(stats["num_correct"].items()):
            print(f"  {n}: {count} quizzes")

        print("\nAnswers per quiz:")
        for n, count in sorted(stats["num_answers"].items()):
            print(f"  {n}: {count} quizzes")


if __name__ == "__main__":
    main()
