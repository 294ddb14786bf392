"""Simple entrypoint to print a sample recommendation locally."""

import json

from ride_app.app import RideOutfitApp


def main() -> None:
    app = RideOutfitApp()
    response = app.recommend(
        {
            "temperature": 8,
            "humidity": 75,
            "wind_speed": 12,
            "workout_intensity": "tempo",
            "workout_duration": 90,
        }
    )
    print(json.dumps(response, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
