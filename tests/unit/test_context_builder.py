"""Unit tests for excerpt assembly and retrieval."""

import pytest

from tutorlite.rag.context_builder import (
    assemble_excerpt,
    find_relevant_content,
    retrieve,
)
from tutorlite.rag.scorer import ScoredSentence, first_paragraphs

SENTENCES = [
    "Sentence zero is here",
    "Sentence one is here",
    "Sentence two is here",
    "Sentence three is here",
    "Sentence four is here",
    "Sentence five is here",
]


def _selected(*indices: int) -> list[ScoredSentence]:
    return [ScoredSentence(text=SENTENCES[i], index=i, score=1.0) for i in indices]


@pytest.mark.unit
class TestAssembleExcerpt:
    """Tests for assemble_excerpt."""

    def test_includes_both_neighbours(self) -> None:
        excerpt = assemble_excerpt(_selected(2), SENTENCES)
        assert excerpt == "Sentence one is here. Sentence two is here. Sentence three is here."

    def test_first_sentence_has_no_previous(self) -> None:
        excerpt = assemble_excerpt(_selected(0), SENTENCES)
        assert excerpt == "Sentence zero is here. Sentence one is here."

    def test_last_sentence_has_no_next(self) -> None:
        excerpt = assemble_excerpt(_selected(5), SENTENCES)
        assert excerpt == "Sentence four is here. Sentence five is here."

    def test_overlapping_windows_are_merged(self) -> None:
        excerpt = assemble_excerpt(_selected(1, 2), SENTENCES)
        assert excerpt == (
            "Sentence zero is here. Sentence one is here. "
            "Sentence two is here. Sentence three is here."
        )

    def test_output_follows_document_order(self) -> None:
        """Selection order (by score) does not affect the excerpt order."""
        excerpt = assemble_excerpt(_selected(5, 0), SENTENCES)
        assert excerpt == (
            "Sentence zero is here. Sentence one is here. "
            "Sentence four is here. Sentence five is here."
        )

    def test_duplicate_texts_appear_once(self) -> None:
        sentences = ["Repeated sentence text", "Unique middle sentence", "Repeated sentence text"]
        selected = [ScoredSentence(text=sentences[1], index=1, score=1.0)]
        assert assemble_excerpt(selected, sentences) == (
            "Repeated sentence text. Unique middle sentence."
        )

    def test_single_sentence_content(self) -> None:
        sentences = ["The only sentence available"]
        selected = [ScoredSentence(text=sentences[0], index=0, score=1.5)]
        assert assemble_excerpt(selected, sentences) == "The only sentence available."


@pytest.mark.unit
class TestRetrieve:
    """Tests for retrieve and find_relevant_content."""

    def test_viral_loop_excerpt(self, course_content: str) -> None:
        excerpt = find_relevant_content("What is a viral loop?", course_content)
        assert excerpt == (
            "It focuses on rapid experimentation across the funnel. "
            "Viral Loops: Design your product so that users naturally invite others. "
            "Each new user should bring in more users over time."
        )

    def test_retrieval_details(self, course_content: str) -> None:
        retrieval = retrieve("What is a viral loop?", course_content)
        assert retrieval.keywords == {"viral", "loop"}
        assert retrieval.used_fallback is False
        assert len(retrieval.sentences) == 7
        assert [(item.index, item.score) for item in retrieval.ranked] == [(2, 2.5)]

    def test_empty_keywords_fall_back_to_leading_paragraphs(self, course_content: str) -> None:
        retrieval = retrieve("What is it?", course_content)
        assert retrieval.keywords == frozenset()
        assert retrieval.used_fallback is True
        assert retrieval.sentences == []
        assert retrieval.excerpt == first_paragraphs(course_content)

    def test_no_match_falls_back_to_leading_paragraphs(self, course_content: str) -> None:
        retrieval = retrieve("Explain blockchain consensus", course_content)
        assert retrieval.used_fallback is True
        assert retrieval.ranked == []
        assert retrieval.excerpt == first_paragraphs(course_content)

    def test_short_sentences_only_fall_back(self) -> None:
        content = "Churn. Churn!\n\nChurn? Yes."
        assert find_relevant_content("churn rate", content) == first_paragraphs(content)

    def test_match_in_last_sentence(self, course_content: str) -> None:
        excerpt = find_relevant_content("Define churn", course_content)
        assert excerpt == (
            "Retention matters more than acquisition in the long run. "
            "Churn measures the share of customers who stop paying each month.."
        )
