import argparse
import csv

import requests

FIELDS = ("name", "phone", "email", "birth_date")


def load_patients(path):
    patients = []
    with open(path, newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            patients.append({k: row[k].strip() for k in FIELDS})
    return patients


def seed(url, patients, timeout=5):
    results = []
    for payload in patients:
        try:
            r = requests.post(url, json=payload, timeout=timeout)
            print(f"[{payload['email']}] {r.status_code} {r.headers.get('Location', '')}")
            results.append(r.status_code)
        except requests.RequestException as e:
            print(f"[{payload['email']}] ERROR {e}")
            results.append(None)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="POST sample patients to a deployed /patients endpoint")
    parser.add_argument("--url", required=True, help="e.g. https://<api-id>.execute-api.<region>.amazonaws.com/dev/patients")
    parser.add_argument("--csv", default="patients.csv", help="CSV with name,phone,email,birth_date columns")
    args = parser.parse_args(argv)
    results = seed(args.url, load_patients(args.csv))
    return 0 if all(s == 200 for s in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
