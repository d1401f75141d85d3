import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_ats.schemas import CvDocument, CvGenerationPayload  # noqa: E402
from cv_ats.services.documents import (  # noqa: E402
    create_document,
    generated_document,
    optimize_document,
    reanalyze_document,
)

UPLOADED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)
EVALUATED_AT = datetime(2024, 1, 2, tzinfo=timezone.utc)

RESUME_TEXT = (
    "Jane Doe\r\n"
    "Austin, TX\r\n"
    "jane@example.com\r\n\r\n\r\n\r\n"
    "Summary\r\n"
    "Data analyst focused on forecasting and automation.\r\n"
    "Experience\r\n"
    "Analyst at Acme 2018 - 2023. Built Terraform pipelines.\r\n"
)


class DocumentLifecycleTests(unittest.TestCase):
    def _document(self, **kwargs) -> CvDocument:
        return create_document(
            "jane_doe.txt",
            RESUME_TEXT,
            document_id="cv-1",
            uploaded_at=UPLOADED_AT,
            **kwargs,
        )

    def test_create_document_normalizes_and_scores_text(self):
        document = self._document(job_target="Data Analyst")
        self.assertEqual(document.id, "cv-1")
        self.assertEqual(document.title, "Jane Doe - jane doe")
        self.assertNotIn("\r", document.text_content)
        self.assertNotIn("\n\n\n", document.text_content)
        self.assertEqual(document.file_size, len(RESUME_TEXT.encode("utf-8")))
        self.assertEqual(document.mime_type, "application/octet-stream")
        self.assertEqual(document.stats.experience_years, 6)
        self.assertEqual(document.stats.contact.location, "Austin, TX")
        self.assertIsNone(document.analysis)
        self.assertFalse(document.generated)

    def test_reanalyze_reuses_stored_job_context(self):
        document = self._document(job_description="Terraform pipelines and Terraform modules")
        updated = reanalyze_document(document, evaluated_at=EVALUATED_AT)

        self.assertIsNone(document.analysis)
        self.assertIsNotNone(updated.analysis)
        self.assertEqual(updated.analysis.evaluated_at, EVALUATED_AT)
        self.assertEqual(updated.job_description, document.job_description)
        found = {match.keyword for match in updated.stats.keyword_matches if match.found}
        self.assertIn("terraform", found)

    def test_reanalyze_overrides_job_target(self):
        document = self._document(job_target="Data Analyst")
        updated = reanalyze_document(document, job_target="Platform Engineer", evaluated_at=EVALUATED_AT)
        self.assertEqual(updated.job_target, "Platform Engineer")
        keywords = [match.keyword for match in updated.stats.keyword_matches]
        self.assertIn("Platform", keywords)
        self.assertNotIn("Analyst", keywords)

    def test_optimize_without_prior_analysis(self):
        document = self._document()
        optimized = optimize_document(document, ["Projects"], updated_at=EVALUATED_AT)
        self.assertIsNone(optimized.analysis)
        self.assertIsNotNone(optimized.optimization)
        self.assertEqual(optimized.optimization.updated_at, EVALUATED_AT)
        self.assertEqual(optimized.stats, document.stats)

    def test_optimize_uses_stored_analysis(self):
        analyzed = reanalyze_document(self._document(), evaluated_at=EVALUATED_AT)
        optimized = optimize_document(analyzed, updated_at=EVALUATED_AT)
        self.assertLessEqual(optimized.optimization.raised_score, 100)
        self.assertGreaterEqual(optimized.optimization.raised_score, analyzed.analysis.score + 6)

    def test_generated_document(self):
        payload = CvGenerationPayload(
            full_name="Jane  Doe",
            target_role="Data Analyst",
            summary="Analyst.",
            skills=("SQL", "Python"),
        )
        document, draft = generated_document(payload, document_id="cv-2", uploaded_at=UPLOADED_AT)
        self.assertTrue(document.generated)
        self.assertEqual(document.title, "Jane  Doe - Data Analyst")
        self.assertEqual(document.file_name, "jane_doe_1704067200000.txt")
        self.assertEqual(document.mime_type, "text/plain")
        self.assertEqual(document.text_content, draft)
        self.assertEqual(document.job_target, "Data Analyst")

    def test_document_round_trips_through_json(self):
        document = reanalyze_document(self._document(), evaluated_at=EVALUATED_AT)
        stored = document.model_dump(mode="json", by_alias=True)
        self.assertIn("textContent", stored)
        self.assertEqual(CvDocument.model_validate(stored), document)


if __name__ == "__main__":
    unittest.main()
