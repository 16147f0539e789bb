from importlib import reload


def test_public_api_imports():
    import pdfeditx

    reload(pdfeditx)

    for name in ("load_info", "merge_pdfs", "apply_annotations", "compress_pdf", "optimize_pdf"):
        assert callable(getattr(pdfeditx, name)), f"pdfeditx must expose {name}"


def test_document_adapter_imports():
    from pdfeditx.core import document

    assert document.PasswordType.NOT_DECRYPTED is not None
    assert callable(document.open_reader)
