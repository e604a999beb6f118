"""Display formatting for training runs and query results."""

import numpy as np
import pandas as pd

__all__ = [
    "truncate_path_to_fit",
    "print_training_header",
    "print_completion_banner",
    "synonyms_frame",
    "print_synonyms",
    "print_analogy",
    "plot_neighbours",
    "LINE_WIDTH",
]

LINE_WIDTH = 100


def truncate_path_to_fit(path, prefix, width=LINE_WIDTH):
    """
    Shorten a path from the left so that prefix + path fits in width.

    Args:
        path: Path or string to display (None renders as "-").
        prefix (str): Label printed before the path.
        width (int): Total line width.

    Returns:
        str: The path, possibly prefixed with "..." and cut from the left.
    """
    if path is None:
        return "-"
    path = str(path)
    available = width - len(prefix)
    if len(path) <= available:
        return path
    if available <= 3:
        return path[-max(available, 0):]
    return "..." + path[-(available - 3):]


def print_training_header(start_time, corpus_path, model_path, training, remove_stopwords):
    """
    Print training configuration header.

    Args:
        start_time (datetime): Start time of the process.
        corpus_path (str): Corpus file path.
        model_path (str or None): Output model path.
        training (TrainingConfig): Word2Vec hyperparameters.
        remove_stopwords (bool): Whether stopwords are removed.
    """
    corpus_str = truncate_path_to_fit(corpus_path, "Corpus:               ", LINE_WIDTH)
    model_str = truncate_path_to_fit(model_path, "Model path:           ", LINE_WIDTH)

    lines = [
        "WORD2VEC REVIEW MODEL TRAINING",
        "━" * LINE_WIDTH,
        f"Start Time: {start_time:%Y-%m-%d %H:%M:%S}",
        "",
        "Configuration",
        "═" * LINE_WIDTH,
        f"Corpus:               {corpus_str}",
        f"Model path:           {model_str}",
        f"Remove stopwords:     {'Yes' if remove_stopwords else 'No'}",
        "",
        "Hyperparameters",
        "─" * LINE_WIDTH,
        f"Vector size:          {training.vector_size}",
        f"Min count:            {training.min_count}",
        f"Window:               {training.window}",
        f"Epochs:               {training.epochs}",
        f"Workers:              {training.workers}",
        f"Seed:                 {training.seed}",
        "",
    ]
    print("\n".join(lines), flush=True)


def print_completion_banner(model_path, num_documents, vocab_size, runtime):
    """
    Print completion banner with statistics.

    Args:
        model_path (str or None): Where the model was saved.
        num_documents (int): Sentences used for training.
        vocab_size (int): Tokens in the trained vocabulary.
        runtime (timedelta): Total runtime.
    """
    model_str = truncate_path_to_fit(model_path, "Model path:           ", LINE_WIDTH)

    lines = [
        "",
        "Training Complete",
        "═" * LINE_WIDTH,
        f"Sentences:            {num_documents}",
        f"Vocabulary size:      {vocab_size}",
        f"Model path:           {model_str}",
        f"Total runtime:        {runtime}",
        "━" * LINE_WIDTH,
        "",
    ]
    print("\n".join(lines), flush=True)


def synonyms_frame(synonyms):
    """Tabulate Synonym results as a DataFrame with 'word' and 'similarity' columns."""
    return pd.DataFrame(
        [(s.token, s.similarity) for s in synonyms],
        columns=["word", "similarity"],
    )


def print_synonyms(phrase, synonyms):
    """Print a synonym query and its ranked results."""
    print("")
    print(f"Synonyms for {phrase!r}")
    print("═" * LINE_WIDTH)
    if not synonyms:
        print("(no results)")
    else:
        for rank, hit in enumerate(synonyms, start=1):
            print(f"{rank:>3}. {hit.token:<40}{hit.similarity:>20.4f}")
    print("─" * LINE_WIDTH, flush=True)


def print_analogy(x, is_to_y, like_z, is_to_a, distance):
    """Print an analogy and its distance score."""
    print("")
    print(f"{x} : {is_to_y} :: {like_z} : {is_to_a}")
    print("═" * LINE_WIDTH)
    print(f"Distance:               {distance:>20.4f}")
    print("─" * LINE_WIDTH, flush=True)


def plot_neighbours(model, words, figsize=(8, 6), display_dpi=160, title=None):
    """
    Scatter plot of words projected onto their first two principal components.

    Out-of-vocabulary words are skipped.

    Args:
        model (VocabularyModel): Model supplying the vectors.
        words (iterable of str): Words to plot, e.g. a query plus its synonyms.
        figsize (tuple): Figure size (width, height) in inches.
        display_dpi (int): DPI for rendering.
        title (str, optional): Figure title.

    Returns:
        matplotlib.figure.Figure: The projection figure.

    Raises:
        ValueError: If fewer than two of the words are in the vocabulary.
    """
    import matplotlib.pyplot as plt
    from sklearn.decomposition import PCA

    frame = model.to_frame(dict.fromkeys(words))
    if len(frame) < 2:
        raise ValueError("Need at least two in-vocabulary words to plot a projection.")

    matrix = np.vstack(frame["vector"].to_list())
    coords = PCA(n_components=2).fit_transform(matrix)

    fig, ax = plt.subplots(figsize=figsize, dpi=display_dpi)
    ax.scatter(coords[:, 0], coords[:, 1], color='steelblue', alpha=0.7, edgecolor='black')
    for word, (px, py) in zip(frame["word"], coords):
        ax.annotate(word, (px, py), xytext=(4, 4), textcoords='offset points', fontsize=10)
    ax.set_xlabel('PC1')
    ax.set_ylabel('PC2')
    ax.set_title(title or 'Word Projection')
    ax.grid(alpha=0.3)
    fig.tight_layout()
    return fig
