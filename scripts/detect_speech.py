#!/usr/bin/env python3
"""Run Gaussian VAD over an audio file and print per-frame decisions.

The recording must start with a noise-only lead-in: the first
noise-frame-count frames are used to estimate the noise floor.
"""

import argparse
import json
import sys
from pathlib import Path

from gaussvad.audio import AudioConverter
from gaussvad.domain.models import DetectionConfig
from gaussvad.engine.exceptions import EngineError
from gaussvad.engine.settings import settings
from gaussvad.engine.vad import GaussianVAD


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Frame-level voice activity detection for an audio file"
    )
    parser.add_argument("audio_file", type=Path, help="Audio file to analyse")
    parser.add_argument(
        "--frame-length",
        type=int,
        default=settings.frame_length,
        help=f"Samples per frame, power of two (default: {settings.frame_length})",
    )
    parser.add_argument(
        "--hop-length",
        type=int,
        default=settings.hop_length,
        help=f"Samples between frames (default: {settings.hop_length})",
    )
    parser.add_argument(
        "--sample-rate",
        type=int,
        default=settings.sample_rate,
        help=f"Decode sample rate in Hz (default: {settings.sample_rate})",
    )
    parser.add_argument(
        "--noise-frames",
        type=int,
        default=settings.noise_frame_count,
        help=f"Leading noise-only frames (default: {settings.noise_frame_count})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=settings.decision_threshold,
        help=f"Likelihood threshold (default: {settings.decision_threshold})",
    )
    parser.add_argument(
        "--transform",
        choices=["fast", "reference"],
        default=settings.transform,
        help=f"Transform variant (default: {settings.transform})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print {speechFrames, logLikelihood} as JSON",
    )
    args = parser.parse_args()

    config = DetectionConfig(
        frame_length=args.frame_length,
        hop_length=args.hop_length,
        sample_rate=args.sample_rate,
        noise_frame_count=args.noise_frames,
        alpha=settings.snr_alpha,
        threshold=args.threshold,
    )

    try:
        audio, _ = AudioConverter(args.sample_rate).load_file(args.audio_file)
        vad = GaussianVAD(config, transform=args.transform)
        result = vad.detect(audio)
    except EngineError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict()))
        return 0

    print(f"=== {args.audio_file.name} ===")
    print(f"Frames: {result.frame_count}")
    print(f"Speech: {result.speech_percentage:.1f}%")
    print()
    for time_sec, is_speech, log_l in zip(
        result.frame_times(), result.speech_frames, result.log_likelihood
    ):
        label = "SPEECH" if is_speech else "noise "
        print(f"  {time_sec:8.3f}s  {label}  {log_l:10.4f}")

    segments = result.speech_segments()
    if segments:
        print("\nSpeech segments:")
        for segment in segments:
            print(f"  {segment.start_time:.3f}s - {segment.end_time:.3f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
