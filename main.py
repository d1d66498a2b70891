"""Convenience entry point: convert an XML documentation file to Markdown."""

from doc_to_markdown.convert_xml_doc import main

if __name__ == "__main__":
    raise SystemExit(main())
