import argparse
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from sha1ref.avalanche import DIGEST_BITS, analyse
from sha1ref.sha import SHA1


def parse_hex_bytes(text: str) -> bytes:
	cleaned = "".join(text.split())
	try:
		return bytes.fromhex(cleaned)
	except ValueError as exc:
		raise argparse.ArgumentTypeError("Message must be provided as hexadecimal text") from exc


def parse_positive(text: str) -> int:
	try:
		value = int(text)
	except ValueError as exc:
		raise argparse.ArgumentTypeError(f"Expected an integer, got {text!r}") from exc
	if value < 1:
		raise argparse.ArgumentTypeError("Value must be positive")
	return value


def format_digest(result: SHA1, fmt: str) -> str:
	if fmt == "words":
		return " ".join(f"{word:08x}" for word in result.words)
	return result.hexdigest()


def read_sources(args: argparse.Namespace) -> List[Tuple[str, bytes]]:
	sources: List[Tuple[str, bytes]] = []
	if getattr(args, "text", None) is not None:
		sources.append(("-", args.text.encode("utf-8")))
	if getattr(args, "hex", None) is not None:
		sources.append(("-", args.hex))
	for path in getattr(args, "files", None) or []:
		try:
			sources.append((str(path), path.read_bytes()))
		except OSError as exc:
			raise SystemExit(f"Unable to read {path}: {exc.strerror}") from exc
	return sources


def _cmd_digest(args: argparse.Namespace) -> None:
	sources = read_sources(args)
	if not sources:
		raise SystemExit("Provide --text, --hex or at least one file")
	for name, data in sources:
		print(f"{format_digest(SHA1(data), args.format)}  {name}")


def _cmd_avalanche(args: argparse.Namespace) -> None:
	if args.text is not None and args.hex is not None:
		raise SystemExit("Specify either --text or --hex, not both")
	data = args.hex if args.hex is not None else (args.text or "").encode("utf-8")
	if not data:
		raise SystemExit("Avalanche analysis needs a non-empty message")

	report = analyse(data, samples=args.samples, seed=args.seed)
	print(f"flips:   {report.flips}")
	print(f"mean:    {report.mean:.2f} / {DIGEST_BITS} bits")
	print(f"min:     {report.minimum}")
	print(f"max:     {report.maximum}")
	print(f"ratio:   {report.ratio:.4f}")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		description="Reference SHA-1 digest (FIPS 180-4) with avalanche analysis",
	)
	subparsers = parser.add_subparsers(dest="command", required=True)

	digest_parser = subparsers.add_parser("digest", help="Print the SHA-1 digest of a message or files")
	digest_parser.add_argument("files", nargs="*", type=Path, help="Files to hash, read whole")
	digest_parser.add_argument("--text", help="Literal UTF-8 string to hash")
	digest_parser.add_argument("--hex", type=parse_hex_bytes, help="Message bytes in hex")
	digest_parser.add_argument(
		"--format",
		choices=("hex", "words"),
		default="hex",
		help="Output as one hex string or five 32-bit words (default: hex)",
	)
	digest_parser.set_defaults(func=_cmd_digest)

	avalanche_parser = subparsers.add_parser(
		"avalanche",
		help="Measure how many digest bits change per flipped input bit",
	)
	avalanche_parser.add_argument("--text", help="Literal UTF-8 string to analyse")
	avalanche_parser.add_argument("--hex", type=parse_hex_bytes, help="Message bytes in hex")
	avalanche_parser.add_argument(
		"--samples",
		type=parse_positive,
		help="Flip only this many randomly chosen bits (default: every bit)",
	)
	avalanche_parser.add_argument("--seed", type=int, help="Seed for bit sampling")
	avalanche_parser.set_defaults(func=_cmd_avalanche)

	return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	args.func(args)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
