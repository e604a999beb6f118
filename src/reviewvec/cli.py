"""Command-line driver: train a review model and query it."""
import argparse
import logging
import sys

from reviewvec.common.errors import NotFoundError
from reviewvec.common.w2v_model import VocabularyModel
from reviewvec.display import print_analogy, print_synonyms
from reviewvec.query.analogy import AnalogyEngine
from reviewvec.query.synonyms import QueryComposer
from reviewvec.review_acquire.config import AcquisitionConfig, CorpusConfig, TrainingConfig
from reviewvec.review_acquire.core import train_review_model

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="reviewvec",
        description="Train Word2Vec on movie reviews and query synonyms and analogies.",
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    train = sub.add_parser("train", help="Train a model from a review corpus")
    train.add_argument("corpus", help="Newline-delimited review file")
    train.add_argument("output", help="Destination .kv model file")
    train.add_argument("--vector-size", type=int, default=200)
    train.add_argument("--min-count", type=int, default=10)
    train.add_argument("--window", type=int, default=5)
    train.add_argument("--epochs", type=int, default=5)
    train.add_argument("--workers", type=int, default=1)
    train.add_argument("--seed", type=int, default=42)
    train.add_argument("--keep-stopwords", action="store_true",
                       help="Do not remove stopwords before training")
    train.add_argument("--quiet", action="store_true", help="No banners or progress bars")

    synonyms = sub.add_parser("synonyms", help="Nearest tokens to a phrase")
    synonyms.add_argument("model", help=".kv model file")
    synonyms.add_argument("phrase")
    synonyms.add_argument("-k", type=int, default=10)

    analogy = sub.add_parser("analogy", help="Score 'x is to y as z is to a'")
    analogy.add_argument("model", help=".kv model file")
    analogy.add_argument("x")
    analogy.add_argument("y")
    analogy.add_argument("z")
    analogy.add_argument("a")

    complete = sub.add_parser("complete", help="Solve 'x is to y as z is to ?'")
    complete.add_argument("model", help=".kv model file")
    complete.add_argument("x")
    complete.add_argument("y")
    complete.add_argument("z")
    complete.add_argument("-k", type=int, default=10)

    return parser


def run(args):
    if args.command == "train":
        config = AcquisitionConfig(
            corpus=CorpusConfig(path=args.corpus, remove_stopwords=not args.keep_stopwords),
            model_path=args.output,
            training=TrainingConfig(
                vector_size=args.vector_size,
                min_count=args.min_count,
                window=args.window,
                epochs=args.epochs,
                workers=args.workers,
                seed=args.seed,
            ),
        )
        train_review_model(config, verbose=not args.quiet)
        return

    model = VocabularyModel.load(args.model)

    if args.command == "synonyms":
        print_synonyms(args.phrase, QueryComposer(model).query(args.phrase, args.k))
    elif args.command == "analogy":
        distance = AnalogyEngine(model).score(args.x, args.y, args.z, args.a)
        print_analogy(args.x, args.y, args.z, args.a, distance)
    elif args.command == "complete":
        hits = AnalogyEngine(model).complete(args.x, args.y, args.z, args.k)
        print_synonyms(f"{args.x} : {args.y} :: {args.z} : ?", hits)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except (NotFoundError, FileNotFoundError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
