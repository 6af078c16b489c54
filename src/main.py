"""
Focus crop command-line tool.

Finds the saliency focus point of one or more images and writes a
content-aware crop of each, optionally with a debug heat-map.

Usage:
    python src/main.py --config config/config.yaml --input photo.jpg \
        --width 400 --height 400 --output out/

Arguments:
    --config: Path to configuration file
    --input: Image file(s) or directories of images
    --width/--height: Output crop size in pixels
    --output: Output directory for crops
    --heatmap: Also write a heat-map next to each crop
"""

import os
import sys
import argparse
import logging
import yaml
import cv2
from typing import Dict, Any, Tuple, Optional

from models.config import Config
from algorithms.saliency import extract
from observation import ImageFileSource, ImageFileSourceConfig
from ops.logging import setup_logging
from pipeline.engine import create_pipeline_from_config
from visualization.heatmap import render


def _merge_into(target: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Fold overrides into target, descending into nested mappings; returns target."""
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge_into(target[key], value)
        else:
            target[key] = value
    return target


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Build the effective configuration from YAML layers, later layers winning:
    - `default.yaml` beside config_path (checked-in defaults)
    - `config.yaml` beside config_path (machine-local overrides)
    - config_path itself, when it names some other file
    Missing layers are skipped.
    """
    config_dir = os.path.dirname(config_path)
    layers = [os.path.join(config_dir, "default.yaml"), os.path.join(config_dir, "config.yaml")]
    if os.path.abspath(config_path) not in [os.path.abspath(p) for p in layers]:
        layers.append(config_path)

    merged: Dict[str, Any] = {}
    try:
        for path in layers:
            if os.path.exists(path):
                _merge_into(merged, _read_yaml(path))
    except Exception as e:
        logging.error(f"Failed to load configuration: {e}")
        sys.exit(1)
    return merged


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_config(config: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate configuration file structure and values.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (is_valid, error_message)
    """
    required_sections = ['model', 'log_path', 'log_level']
    for section in required_sections:
        if section not in config:
            return False, f"Missing required configuration section: {section}"

    # Model
    model = config.get('model') or {}
    if model.get('backend', 'tflite') != 'tflite':
        return False, "model.backend must be one of: tflite"
    if 'path' not in model:
        return False, "Missing model.path"
    if not isinstance(model['path'], str) or not model['path']:
        return False, "model.path must be a non-empty string"

    input_size = model.get('input_size', 176)
    if not _is_positive_int(input_size):
        return False, "model.input_size must be a positive integer"
    stride = model.get('output_stride', 8)
    if not _is_positive_int(stride):
        return False, "model.output_stride must be a positive integer"
    if input_size % stride != 0:
        return False, "model.input_size must be divisible by model.output_stride"
    if model.get('num_threads') is not None and not _is_positive_int(model['num_threads']):
        return False, "model.num_threads must be a positive integer"

    # Focus
    focus = config.get('focus') or {}
    if 'temperature' in focus:
        if not _is_number(focus['temperature']) or focus['temperature'] <= 0:
            return False, "focus.temperature must be a number greater than 0"
    if 'lower_bound' in focus:
        lb = focus['lower_bound']
        if not _is_number(lb) or not (0 <= lb <= 1):
            return False, "focus.lower_bound must be between 0 and 1"

    # Heat-map
    heatmap = config.get('heatmap') or {}
    if 'display_size' in heatmap and not _is_positive_int(heatmap['display_size']):
        return False, "heatmap.display_size must be a positive integer"

    # Logging
    valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    if config['log_level'] not in valid_log_levels:
        return False, f"log_level must be one of: {', '.join(valid_log_levels)}"
    if not isinstance(config['log_path'], str):
        return False, "log_path must be a string"

    return True, None


def _write_rgb(path: str, image) -> None:
    if image.shape[2] == 4:
        bgr = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
    else:
        bgr = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(path, bgr):
        raise RuntimeError(f"Failed to write image: {path}")


def main():
    """Main application function."""
    parser = argparse.ArgumentParser(description='Saliency focus point and content-aware crop')
    parser.add_argument('--config', type=str, default='config/config.yaml',
                        help='Path to configuration file')
    parser.add_argument('--input', type=str, nargs='+', required=True,
                        help='Image file(s) or directories of images')
    parser.add_argument('--width', type=int, required=True,
                        help='Output width in pixels')
    parser.add_argument('--height', type=int, required=True,
                        help='Output height in pixels')
    parser.add_argument('--output', type=str, default='output/crops',
                        help='Output directory for crops')
    parser.add_argument('--heatmap', action='store_true',
                        help='Also write a debug heat-map per image')
    args = parser.parse_args()

    raw_config = load_config(args.config)

    is_valid, error_msg = validate_config(raw_config)
    if not is_valid:
        logging.error(f"Configuration validation failed: {error_msg}")
        sys.exit(1)

    setup_logging(raw_config['log_path'], raw_config['log_level'])
    config = Config.from_dict(raw_config)

    if not os.path.exists(args.output):
        os.makedirs(args.output)

    logging.info(f"Starting focus crop: model={config.model.path} size={args.width}x{args.height}")

    try:
        pipeline = create_pipeline_from_config(config)
        source = ImageFileSource(ImageFileSourceConfig(source_id="cli", paths=args.input))

        with source:
            for pixels in source:
                name = os.path.splitext(os.path.basename(source.current_path))[0]
                grid = pipeline.saliency_grid(pixels)
                focus = extract(grid, lower_bound=pipeline.config.lower_bound)
                cropped = pipeline.crop(pixels, args.width, args.height, focus=focus)
                crop_path = os.path.join(args.output, f"{name}_crop.png")
                _write_rgb(crop_path, cropped)
                logging.info(
                    f"{source.current_path}: focus=({focus.x:.3f}, {focus.y:.3f}) -> {crop_path}"
                )
                print(f"{source.current_path}\t{focus.x:.4f}\t{focus.y:.4f}\t{crop_path}")

                if args.heatmap:
                    heat_path = os.path.join(args.output, f"{name}_heatmap.png")
                    heat = render(
                        grid, focus, pipeline.config.lower_bound,
                        display_size=pipeline.config.display_size,
                    )
                    _write_rgb(heat_path, heat)

        logging.info(f"Processed {source.read_count} image(s)")
    except Exception as e:
        logging.error(f"Focus crop failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
