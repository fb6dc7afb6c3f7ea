"""Export of analysis results: JSON documents, frequency tables and charts."""

import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd

from src.text_analysis.result import AnalysisResult

logger = logging.getLogger(__name__)

SENTIMENT_COLORS = {
    'positive': '#10b981',
    'negative': '#ef4444',
    'neutral': '#6b7280'
}

BAR_COLOR = '#a855f7'
PIE_COLORS = ['#a855f7', '#3b82f6', '#10b981', '#f59e0b', '#ef4444']


class ResultExporter:
    """Serialize an AnalysisResult and draw charts from its top words."""

    def __init__(self, output_dir: str = "./output/plots", clipboard_header: str = "NLP Analysis Results"):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for saving plots (created on first plot)
            clipboard_header: First line of the text copied to the clipboard
        """
        self.output_dir = Path(output_dir)
        self.clipboard_header = clipboard_header

    def to_json(self, result: AnalysisResult) -> str:
        """Serialize the result as an indented JSON document."""
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    def to_json_bytes(self, result: AnalysisResult) -> bytes:
        """JSON document encoded for a file download."""
        return self.to_json(result).encode('utf-8')

    def clipboard_text(self, result: AnalysisResult) -> str:
        """Header line, blank line, then the JSON document."""
        return f"{self.clipboard_header}\n\n{self.to_json(result)}"

    def frequency_table(self, result: AnalysisResult) -> pd.DataFrame:
        """
        Build a ranking table from the top words.

        Args:
            result: Analysis result

        Returns:
            DataFrame with columns: rank, word, count, share
            (share is the fraction of filtered tokens taken by the word)
        """
        df = pd.DataFrame(
            [(word_count.word, word_count.count) for word_count in result.top_words],
            columns=['word', 'count']
        )
        df.insert(0, 'rank', range(1, len(df) + 1))

        total = len(result.filtered)
        df['share'] = df['count'] / total if total else 0.0

        return df

    def plot_top_words(self, result: AnalysisResult, save_path: Optional[str] = None) -> Optional[str]:
        """
        Create bar chart of the top words.

        Args:
            result: Analysis result
            save_path: Path to save plot (optional)

        Returns:
            Path to saved plot, or None if there are no words to plot
        """
        if not result.top_words:
            return None

        if save_path is None:
            save_path = self._default_path("top_words", result)

        df = self.frequency_table(result)

        fig, ax = plt.subplots(figsize=(10, 4))
        ax.bar(df['word'], df['count'], color=BAR_COLOR)
        ax.set_xlabel('Word')
        ax.set_ylabel('Count')
        ax.set_title('Top Words')
        ax.grid(True, axis='y', linestyle='--', alpha=0.3)

        self._save(fig, save_path)

        logger.debug("Saved top words chart to %s", save_path)
        return str(save_path)

    def plot_keyword_share(self, result: AnalysisResult, save_path: Optional[str] = None) -> Optional[str]:
        """
        Create pie chart of the five most frequent words.

        Args:
            result: Analysis result
            save_path: Path to save plot (optional)

        Returns:
            Path to saved plot, or None if there are no words to plot
        """
        top_five = result.top_words[:len(PIE_COLORS)]
        if not top_five:
            return None

        if save_path is None:
            save_path = self._default_path("keyword_share", result)

        fig, ax = plt.subplots(figsize=(6, 6))
        ax.pie(
            [word_count.count for word_count in top_five],
            labels=[word_count.word for word_count in top_five],
            colors=PIE_COLORS[:len(top_five)],
            autopct=lambda pct: f'{pct:.0f}%'
        )
        ax.set_title('Word Frequency Distribution')
        ax.axis('equal')

        self._save(fig, save_path)

        logger.debug("Saved keyword share chart to %s", save_path)
        return str(save_path)

    def _default_path(self, prefix: str, result: AnalysisResult) -> str:
        """File name keyed on the result's content, so different results never share a file."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        digest = hashlib.sha1(self.to_json_bytes(result)).hexdigest()[:12]
        return str(self.output_dir / f"{prefix}_{digest}.png")

    @staticmethod
    def _save(fig, save_path: str) -> None:
        # Write to a temporary file first so readers never see a half-written image
        directory = Path(save_path).parent
        fd, tmp_path = tempfile.mkstemp(suffix='.png', dir=directory)
        os.close(fd)
        try:
            fig.tight_layout()
            fig.savefig(tmp_path, dpi=150)
            os.replace(tmp_path, save_path)
        except BaseException:
            os.unlink(tmp_path)
            raise
        finally:
            plt.close(fig)
