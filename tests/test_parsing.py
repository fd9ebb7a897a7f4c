import sys
import unittest
from io import BytesIO
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docx import Document  # noqa: E402
from fastapi import UploadFile  # noqa: E402

from app.parsing.parse import (  # noqa: E402
    DocumentProcessingError,
    parse_document_bytes,
    read_upload_bytes,
    resolve_source_type,
)


class SourceTypeTests(unittest.TestCase):
    def test_declared_content_types(self):
        self.assertEqual(resolve_source_type("application/pdf", "cv"), "pdf")
        self.assertEqual(resolve_source_type("text/plain; charset=utf-8", None), "txt")
        self.assertEqual(resolve_source_type("application/msword", "cv.doc"), "doc")

    def test_generic_uploads_fall_back_to_extension(self):
        self.assertEqual(resolve_source_type("application/octet-stream", "cv.DOCX"), "docx")
        self.assertEqual(resolve_source_type("", "resume.txt"), "txt")

    def test_unsupported_types(self):
        for content_type, filename in (("image/png", "cv.png"), ("image/png", "cv.pdf"), (None, "cv")):
            with self.assertRaises(DocumentProcessingError) as ctx:
                resolve_source_type(content_type, filename)
            self.assertEqual(ctx.exception.status_code, 415)
            self.assertEqual(str(ctx.exception), "Please upload a PDF, DOC, DOCX, or TXT file.")


class ParseDocumentBytesTests(unittest.TestCase):
    def test_parse_txt_returns_stable_parsed_doc(self):
        content = "Line one\n- Bullet item\nLine three"
        parsed = parse_document_bytes(content.encode("utf-8"), source_type="txt", filename="cv.txt")
        self.assertEqual(parsed.source_type, "txt")
        self.assertEqual(parsed.text, content)
        self.assertEqual(parsed.characters, len(content))
        self.assertTrue(parsed.doc_id)
        self.assertEqual(parsed.doc_id, parse_document_bytes(content.encode("utf-8"), source_type="txt").doc_id)

    def test_txt_bom_is_dropped(self):
        parsed = parse_document_bytes(b"\xef\xbb\xbfPython", source_type="txt")
        self.assertEqual(parsed.text, "Python")

    def test_invalid_utf8_fails_whole(self):
        with self.assertRaises(DocumentProcessingError) as ctx:
            parse_document_bytes(b"\xff\xfa broken", source_type="txt", filename="cv.txt")
        self.assertEqual(ctx.exception.status_code, 422)
        self.assertEqual(str(ctx.exception), "There was a problem processing your CV.")

    def test_corrupt_pdf_fails(self):
        with self.assertRaises(DocumentProcessingError) as ctx:
            parse_document_bytes(b"definitely not a pdf", source_type="pdf", filename="cv.pdf")
        self.assertEqual(ctx.exception.status_code, 422)

    def test_docx_paragraphs(self):
        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("")
        document.add_paragraph("Skilled in Python and Docker.")
        buffer = BytesIO()
        document.save(buffer)

        parsed = parse_document_bytes(buffer.getvalue(), source_type="docx", filename="cv.docx")
        self.assertEqual(parsed.text, "Jane Doe\nSkilled in Python and Docker.")
        self.assertEqual(parsed.parsing_warnings, [])

    def test_legacy_doc_keeps_readable_text(self):
        parsed = parse_document_bytes(b"Python\x00\x01Developer", source_type="doc", filename="cv.doc")
        self.assertEqual(parsed.text, "Python Developer")
        self.assertEqual(len(parsed.parsing_warnings), 1)

    def test_unknown_source_type(self):
        with self.assertRaises(DocumentProcessingError) as ctx:
            parse_document_bytes(b"x", source_type="rtf")
        self.assertEqual(ctx.exception.status_code, 415)


class ReadUploadTests(unittest.IsolatedAsyncioTestCase):
    async def test_reads_within_limit(self):
        upload = UploadFile(file=BytesIO(b"Python " * 10), filename="cv.txt")
        self.assertEqual(await read_upload_bytes(upload, 1024), b"Python " * 10)

    async def test_rejects_oversized_upload(self):
        upload = UploadFile(file=BytesIO(b"x" * 2048), filename="cv.txt")
        with self.assertRaises(DocumentProcessingError) as ctx:
            await read_upload_bytes(upload, 1024)
        self.assertEqual(ctx.exception.status_code, 413)


if __name__ == "__main__":
    unittest.main()
