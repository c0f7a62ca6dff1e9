"""Measure ocular landmarks of a photo from the command line.

Usage:
    python tools/measure_photo.py face.jpg
    python tools/measure_photo.py face_h.jpg --vertical face_v.jpg
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root (the folder containing manage.py) is on sys.path
CURRENT_FILE = Path(__file__).resolve()
PROJECT_ROOT = CURRENT_FILE.parents[1]  # backend_django/
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dvs_app.application.use_cases.measure_photo import (  # noqa: E402
    MeasurePatientPhotos,
    MeasurePhoto,
    MeasurePhotoInput,
)
from dvs_app.config.container import get_eye_locator  # noqa: E402
from dvs_app.domain.errors import ConstructionError  # noqa: E402
from dvs_app.domain.photo import PhotoType  # noqa: E402


def main(argv=None, locator=None) -> int:
    ap = argparse.ArgumentParser(description="Locate eyes, pupils and corneal reflexes in a photo")
    ap.add_argument("path", help="Path to the (horizontal) photo")
    ap.add_argument("--orientation", default=PhotoType.HORIZONTAL.value, choices=[t.value for t in PhotoType])
    ap.add_argument("--vertical", default=None, help="Path to the vertical photo of the same patient")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')

    measure = MeasurePhoto(locator=locator or get_eye_locator())
    try:
        if args.vertical:
            results = MeasurePatientPhotos(measure).execute(
                MeasurePhotoInput(image_path=args.path),
                MeasurePhotoInput(image_path=args.vertical),
            )
            doc = {k.value: v.as_dict() for k, v in results.items()}
        else:
            result = measure.execute(MeasurePhotoInput(image_path=args.path, orientation=PhotoType(args.orientation)))
            doc = result.as_dict()
    except ConstructionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(json.dumps(doc, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
