"""
Reagent Colorimetry Pipeline

Main script that orchestrates all modules to estimate a water-test value from
a photo of the reacted reagent.
Process: Acquire -> Sample ROI -> Reference Correction -> HSV -> Interpolate
         (+ Warnings, Interpretation)

Usage:
    python pipeline.py <image|directory|url> [--analyte ph|nh3|no2]
                       [--reference <image>] [--output <output_dir>] [--visualize]
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

import cv2
import numpy as np

from colorimetry import (
    Analyte,
    CALIBRATION_TABLES,
    CalibrationTable,
    ColorimetryError,
    ColorSpaceConverter,
    HSVColor,
    ImageLoader,
    ImageSampler,
    Interpolator,
    Interpretation,
    Interpreter,
    ReferenceCalibrator,
    ReferenceState,
    RGBColor,
    WarningCode,
    WarningEvaluator,
)
from colorimetry.image_source import ImageSource
from colorimetry.visualization import annotate_result
from config import AnalyzerConfig

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ['.jpg', '.jpeg', '.png', '.bmp']


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis call."""
    analyte: Analyte
    value: float
    confidence: int
    hsv: HSVColor
    corrected_rgb: RGBColor
    raw_rgb: RGBColor
    warnings: Tuple[WarningCode, ...]

    def to_dict(self) -> dict:
        return {
            'analyte': self.analyte.value,
            'value': self.value,
            'confidence': self.confidence,
            'hsv': list(self.hsv.as_tuple()),
            'rgb': list(self.corrected_rgb.as_tuple()),
            'raw_rgb': list(self.raw_rgb.as_tuple()),
            'warnings': [w.value for w in self.warnings],
        }


class AnalysisPipeline:
    """Main pipeline for reagent color analysis."""

    def __init__(self,
                 config: Optional[AnalyzerConfig] = None,
                 reference_state: Optional[ReferenceState] = None,
                 loader: Optional[ImageLoader] = None):
        """
        Initialize all modules.

        Args:
            config: Optional config class/object, uses AnalyzerConfig if None
            reference_state: Optional persisted reference state to restore
            loader: Optional image loader, e.g. with a custom timeout
        """
        config = config or AnalyzerConfig
        self.loader = loader or ImageLoader(config.IMAGE_SOURCE)
        self.sampler = ImageSampler(config.SAMPLING)
        self.converter = ColorSpaceConverter()
        self.calibrator = ReferenceCalibrator(reference_state)
        self.interpolator = Interpolator(config.DISTANCE_WEIGHTS, config.INTERPOLATION)
        self.warning_evaluator = WarningEvaluator(config.WARNINGS)
        self.interpreter = Interpreter()

        self.viz_colors = config.VIZ_COLORS

    @property
    def reference_state(self) -> ReferenceState:
        return self.calibrator.state

    @property
    def calibration_tables(self) -> Mapping[Analyte, CalibrationTable]:
        return CALIBRATION_TABLES

    def analyze(self, image_source: ImageSource,
                analyte: Union[Analyte, str]) -> AnalysisResult:
        """
        Run the full analysis on one image.

        Args:
            image_source: Image array, encoded bytes, path or URL
            analyte: Analyte kind; unrecognized kinds use the pH table

        Returns:
            AnalysisResult
        """
        analyte = Analyte.parse(analyte)
        image = self.loader.load(image_source)
        return self.analyze_image(image, analyte)

    def analyze_image(self, image: np.ndarray, analyte: Analyte) -> AnalysisResult:
        """Pure computation part of analyze() on an already decoded frame."""
        state = self.calibrator.state

        # Step 1: Sample ROI
        raw_rgb = self.sampler.sample_roi(image)

        # Step 2: Reference correction
        corrected = self.calibrator.correct(raw_rgb, state)

        # Step 3: HSV
        hsv = self.converter.rgb_to_hsv(corrected)

        # Step 4: Interpolate against the analyte's table
        value, confidence = self.interpolator.interpolate(hsv, CALIBRATION_TABLES[analyte])

        # Step 5: Warnings
        warnings = self.warning_evaluator.evaluate(hsv, raw_rgb, state)

        logger.debug("%s: raw=%s corrected=%s %s -> %s (%d%%)",
                     analyte.value, raw_rgb.as_tuple(), corrected.as_tuple(),
                     hsv, value, confidence)

        return AnalysisResult(
            analyte=analyte,
            value=value,
            confidence=confidence,
            hsv=hsv,
            corrected_rgb=corrected,
            raw_rgb=raw_rgb,
            warnings=warnings,
        )

    def calibrate_reference(self, image_source: ImageSource) -> ReferenceState:
        """Sample the reference patch and make it the new white point."""
        image = self.loader.load(image_source)
        sample = self.sampler.sample_reference(image)
        return self.calibrator.calibrate(sample)

    def interpret(self, analyte: Union[Analyte, str], value: float) -> Interpretation:
        return self.interpreter.classify(analyte, value)

    def visualize_result(self, image: np.ndarray, result: AnalysisResult) -> np.ndarray:
        """
        Create the annotated result image.

        Args:
            image: Original BGR image
            result: Result from analyze()

        Returns:
            Visualization image
        """
        h, w = image.shape[:2]
        roi = self.sampler.roi_region(w, h)
        reference = None
        if self.reference_state.calibrated:
            reference = self.sampler.reference_region(w, h)
        interpretation = self.interpret(result.analyte, result.value)

        text = (f"{result.analyte.display_name} {result.analyte.format_value(result.value)}"
                f" - {interpretation.label} ({result.confidence}%)")
        return annotate_result(image, roi, reference, result.corrected_rgb, text,
                               interpretation.status, self.viz_colors)


def find_images(input_path: Path):
    """Image files in a directory, or the single given file."""
    if input_path.is_file():
        return [input_path]
    image_files = [f for f in input_path.iterdir()
                   if f.is_file() and f.suffix.lower() in IMAGE_EXTENSIONS]
    return sorted(image_files)


def print_result(result: AnalysisResult, interpretation: Interpretation):
    analyte = result.analyte
    print(f"  {analyte.display_name}: {analyte.format_value(result.value)} | "
          f"{interpretation.label} [{interpretation.status}] | "
          f"Confidence: {result.confidence}%")
    print(f"  {result.corrected_rgb.to_css()} (raw {result.raw_rgb.to_css()}) | {result.hsv}")
    for warning in result.warnings:
        print(f"  Warning: {warning.message}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Aquarium Reagent Colorimetry Pipeline')
    parser.add_argument('input', type=str, help='Image file, directory of images, or capture URL')
    parser.add_argument('--analyte', '-a', type=str, default='ph',
                        help='Test kind: ph, nh3 or no2 (default: ph)')
    parser.add_argument('--reference', '-r', type=str,
                        help='Image whose bottom-right patch is the white reference')
    parser.add_argument('--output', '-o', type=str, help='Output directory (default: <input>/analysis_results)')
    parser.add_argument('--visualize', '-v', action='store_true', help='Save annotated result images')
    parser.add_argument('--json', action='store_true', help='Print results as JSON lines')
    parser.add_argument('--timeout', type=float, default=AnalyzerConfig.IMAGE_SOURCE['TIMEOUT'],
                        help='Image download timeout in seconds')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    pipeline = AnalysisPipeline(loader=ImageLoader(timeout=args.timeout))
    analyte = Analyte.parse(args.analyte)

    if args.reference:
        try:
            state = pipeline.calibrate_reference(args.reference)
        except ColorimetryError as e:
            print(f"Error: Reference calibration failed: {e}")
            return 1
        if not args.json:
            print(f"Reference calibrated: {state.reference_color.to_css()}\n")

    is_url = args.input.startswith(('http://', 'https://'))
    if is_url:
        sources = [args.input]
        default_output = Path.cwd() / "analysis_results"
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input does not exist: {input_path}")
            return 1
        sources = find_images(input_path)
        base_dir = input_path if input_path.is_dir() else input_path.parent
        default_output = base_dir / "analysis_results"

    if not sources:
        print("No images found!")
        return 1

    output_dir = Path(args.output) if args.output else default_output
    if args.visualize:
        output_dir.mkdir(exist_ok=True, parents=True)

    if not args.json:
        print(f"Found {len(sources)} image(s) to analyze for {analyte.display_name}\n")

    failures = 0
    for idx, source in enumerate(sources, 1):
        name = source if is_url else source.name
        if not args.json:
            print(f"[{idx}/{len(sources)}] Analyzing {name}...")

        try:
            image = pipeline.loader.load(source)
            result = pipeline.analyze_image(image, analyte)
        except ColorimetryError as e:
            failures += 1
            print(f"  Error: {e}")
            continue

        interpretation = pipeline.interpret(analyte, result.value)

        if args.json:
            record = result.to_dict()
            record['source'] = str(name)
            record['status'] = interpretation.status
            record['label'] = interpretation.label
            print(json.dumps(record))
        else:
            print_result(result, interpretation)

        if args.visualize:
            vis = pipeline.visualize_result(image, result)
            stem = Path(str(name)).stem or f"capture_{idx}"
            out_path = output_dir / f"{stem}_analysis.jpg"
            cv2.imwrite(str(out_path), vis)
            if not args.json:
                print(f"  Saved: {out_path.name}")

    if not args.json:
        print(f"\nDone! {len(sources) - failures}/{len(sources)} image(s) analyzed")

    return 0 if failures < len(sources) else 1


if __name__ == "__main__":
    sys.exit(main())
