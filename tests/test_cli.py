from einvoice_qr import cli

ACME_BASE64 = "AQdBY21lIENvAg8zMDAwMDAwMDAwMDAwMDMDGTIwMjYtMDItMjNUMTg6MzA6MDArMDM6MDAEAzExNQUCMTU="

FLAGS = [
    "--seller-name", "Acme Co",
    "--seller-trn", "300000000000003",
    "--invoice-date", "2026-02-23 18:30",
    "--invoice-total", "115",
    "--vat-total", "15",
]


def _run(argv, answers=()):
    args = cli.build_parser().parse_args(argv)
    replies = iter(answers)
    return args.func(args, ask=lambda prompt: next(replies))


def test_flags_print_base64_and_save_png(tmp_path, capsys):
    code = _run(FLAGS + ["--output-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert ACME_BASE64 in out
    assert str(tmp_path / "zatca_qr.png") in out
    assert (tmp_path / "zatca_qr.png").read_bytes().startswith(b"\x89PNG")


def test_prompts_for_missing_values(capsys):
    answers = ["  Acme Co ", "300000000000003", "2026-02-23 18:30", "115", "15"]
    code = _run(["--no-image"], answers)
    out = capsys.readouterr().out
    assert code == 0
    assert ACME_BASE64 in out
    assert "QR saved to" not in out


def test_validation_failure_exits_with_one(capsys):
    argv = FLAGS[:2] + ["--seller-trn", "200000000000003"] + FLAGS[4:] + ["--no-image"]
    code = _run(argv)
    err = capsys.readouterr().err
    assert code == 1
    assert "Error:" in err
    assert "TRN must start with 3 and end with 3." in err


def test_missing_fields_reported(capsys):
    code = _run(["--no-image"], ["Acme Co", "", "", "115", "15"])
    assert code == 1
    assert "Missing fields: seller_trn, invoice_date" in capsys.readouterr().err


def test_unwritable_output_dir_reports_error(tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    code = _run(FLAGS + ["--output-dir", str(blocker / "sub")])
    captured = capsys.readouterr()
    assert code == 1
    assert "Error:" in captured.err
    assert "Base64:" not in captured.out


def test_main_keeps_warnings_off_stderr(capsys):
    argv = FLAGS[:2] + ["--seller-trn", "200000000000003"] + FLAGS[4:] + ["--no-image"]
    code = cli.main(argv)
    err = capsys.readouterr().err
    assert code == 1
    assert "TRN must start with 3 and end with 3." in err
    assert "failed validation" not in err
