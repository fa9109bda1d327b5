from __future__ import annotations


_LINE_ENDINGS = "\r\n"


def normalize_line(line: str) -> str:
    # Keyword and subdomain files may come from CSV exports: drop one trailing comma.
    line = line.rstrip(_LINE_ENDINGS).strip()
    if line.endswith(","):
        line = line[:-1]
    return line.lower()


def fqdn_from_record(line: str) -> str:
    """
    Extract the FQDN from a subdomain record.

    Records are either a bare name or CSV-like with the name in the last
    field, e.g. `4,4,4,abc.com`.
    """
    line = normalize_line(line)
    return line.rsplit(",", 1)[-1].strip()


def split_labels(fqdn: str) -> list[str]:
    """
    Labels of `fqdn` worth comparing against keywords.

    - Splits on periods and drops empty labels.
    - Leaves out the last label (the TLD) when there is more than one.
    """
    labels = [p for p in fqdn.split(".") if p]
    if len(labels) > 1:
        return labels[:-1]
    return labels
