from manuscript_assessment import assess_plagiarism, assess_quality
from manuscript_assessment.vectors import text_similarity


if __name__ == "__main__":
    sample = (
        "Introduction. We study reviewer workload. Methods were simple. "
        "Results follow. Discussion comes next. Conclusion closes the paper."
    )
    similarity = assess_plagiarism(sample)
    quality = assess_quality(sample, "A short abstract.")
    print(
        {
            "self_similarity": text_similarity(sample, sample),
            "similarity_status": similarity.status,
            "similarity_score": similarity.similarity_score,
            "quality_overall": quality.overall_score,
        }
    )
