"""
Command-line interface for wrapify.
"""

import sys
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
import yaml
import inquirer
from tqdm import tqdm

from .processing.reflow import TextReflower, STYLES
from .validation.reflow_validator import ReflowValidator
from .utils.file_handler import read_file, write_file, read_yaml
from .utils.logger import get_logger, enable_debug_logging

logger = get_logger(__name__)

def get_text_files(paths: Sequence[Union[str, Path]]) -> Tuple[List[Path], List[Path]]:
    """
    Expand input paths into a list of text files.
    
    Args:
        paths: Files or directories; directories are scanned for *.txt
        
    Returns:
        Sorted, de-duplicated list of file paths and the inputs that do
        not exist
    """
    files = []
    missing = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            files.extend(path.glob("**/*.txt"))
        elif path.exists():
            files.append(path)
        else:
            logger.error(f"Input does not exist: {path}")
            missing.append(path)
    return sorted(set(files)), missing

def get_output_paths(input_files: List[Path], roots: Sequence[Union[str, Path]],
                     output_dir: Path) -> Dict[Path, Path]:
    """
    Map each input file to its output file under output_dir.
    
    Files found by scanning a directory keep their path relative to that
    directory; files named directly keep only their name.
    
    Args:
        input_files: Files to reflow
        roots: Input paths as given on the command line
        output_dir: Directory receiving the output files
        
    Returns:
        Dictionary from input file to output file
    """
    directories = [Path(root) for root in roots if Path(root).is_dir()]
    outputs = {}
    
    for input_path in input_files:
        relative = Path(input_path.name)
        for directory in directories:
            try:
                relative = input_path.relative_to(directory)
                break
            except ValueError:
                continue
        outputs[input_path] = output_dir / relative.with_suffix('.txt')
        
    return outputs

def select_text_file(text_files: List[Path]) -> Optional[Path]:
    """
    Display an interactive prompt for the user to select a text file.
    
    Args:
        text_files: List of files to choose from
        
    Returns:
        Selected file path or None if cancelled
    """
    if not text_files:
        logger.error("No text files found")
        return None
        
    choices = [str(text_file) for text_file in text_files]
    
    questions = [
        inquirer.List(
            'text_file',
            message="Select a text file to reflow",
            choices=choices
        )
    ]
    
    try:
        answers = inquirer.prompt(questions)
        if answers and answers.get('text_file'):
            selected = answers['text_file']
            return next((f for f in text_files if str(f) == selected), None)
        return None
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return None

def select_style() -> Optional[str]:
    """
    Display an interactive prompt for the user to select a wrap style.
    
    Returns:
        Selected style or None if cancelled
    """
    questions = [
        inquirer.List(
            'style',
            message="Select indentation style",
            choices=[
                ('Indent first line of each paragraph', 'lead'),
                ('Indent continuation lines (hanging)', 'hanging')
            ]
        )
    ]
    
    try:
        answers = inquirer.prompt(questions)
        return answers.get('style') if answers else None
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return None

def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the YAML config file, if any, with explicit command-line flags."""
    config = read_yaml(args.config) if args.config else {}
    
    if args.style is not None:
        config['style'] = args.style
    if args.width is not None:
        config['max_line_length'] = args.width
    if args.indent is not None:
        config['indent'] = args.indent
        
    return config

def reflow_file(input_path: Path, reflower: TextReflower,
                validator: Optional[ReflowValidator] = None) -> Dict:
    """
    Reflow a single file.
    
    Args:
        input_path: File to read
        reflower: Configured reflower
        validator: Optional validator run on the result
        
    Returns:
        Dictionary with the reflowed text, its stats and validation issues
    """
    logger.debug(f"Reflowing {input_path}")
    result = reflower.process(read_file(input_path))
    result['issues'] = []
    
    if validator:
        validation = validator.validate(result['text'])
        for issue in validation.issues:
            logger.warning(f"{input_path.name}: {issue}")
        result['issues'] = validation.issues
        
    return result

def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Normalize whitespace and reflow paragraphs")
    
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Text files or directories to reflow (prompts when omitted)"
    )
    
    parser.add_argument(
        "--style",
        choices=list(STYLES),
        default=None,
        help="Indent the first line (lead) or the continuation lines (hanging)"
    )
    
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Maximum line length (default: 80)"
    )
    
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent width (default: 3 for lead, 4 for hanging)"
    )
    
    parser.add_argument(
        "--config",
        help="YAML file with style, max_line_length and indent"
    )
    
    parser.add_argument(
        "-o", "--output",
        help="Path to save output for a single input (default: stdout)"
    )
    
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to save output files (default for several inputs: data/output)"
    )
    
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the reflowed text and fail on layout issues"
    )
    
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    
    return parser

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = create_parser().parse_args(argv)
    
    if args.debug:
        enable_debug_logging()
    
    try:
        config = build_config(args)
        reflower = TextReflower(config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {str(e)}")
        print(f"ERROR: {str(e)}", file=sys.stderr)
        return 1
        
    if args.inputs:
        input_files, missing = get_text_files(args.inputs)
        if missing:
            print(f"ERROR: Input not found: {', '.join(str(m) for m in missing)}", file=sys.stderr)
            return 1
    else:
        selected = select_text_file(get_text_files(["."])[0])
        if selected and args.style is None and 'style' not in config:
            style = select_style()
            if style:
                config['style'] = style
                reflower = TextReflower(config)
        input_files = [selected] if selected else []
    
    if not input_files:
        print("No text file selected. Exiting.", file=sys.stderr)
        return 1
    
    validator = None
    if args.validate:
        validator = ReflowValidator({
            'style': reflower.style,
            'max_line_length': reflower.max_line_length,
            'indent': reflower.indent
        })
    
    # Single file without an output location goes to stdout
    if len(input_files) == 1 and not args.output_dir and not any(Path(p).is_dir() for p in args.inputs):
        try:
            result = reflow_file(input_files[0], reflower, validator)
        except (FileNotFoundError, UnicodeDecodeError) as e:
            logger.error(f"Error reflowing {input_files[0]}: {str(e)}")
            print(f"ERROR: {str(e)}", file=sys.stderr)
            return 1
            
        if args.output:
            write_file(result['text'], args.output)
            logger.info(f"Output saved to {args.output}")
        else:
            sys.stdout.write(result['text'])
        return 1 if result['issues'] else 0
    
    if args.output:
        print("ERROR: --output accepts a single input; use --output-dir instead", file=sys.stderr)
        return 1
    
    output_dir = Path(args.output_dir or "data/output")
    output_paths = get_output_paths(input_files, args.inputs, output_dir)
    
    targets = list(output_paths.values())
    collisions = sorted({str(target) for target in targets if targets.count(target) > 1})
    if collisions:
        print(f"ERROR: Several inputs would be written to {', '.join(collisions)}", file=sys.stderr)
        return 1
    
    failed = False
    
    for input_path in tqdm(input_files, desc="Reflowing", unit="file"):
        try:
            result = reflow_file(input_path, reflower, validator)
        except (FileNotFoundError, UnicodeDecodeError) as e:
            logger.error(f"Error reflowing {input_path}: {str(e)}")
            failed = True
            continue
            
        output_file = output_paths[input_path]
        write_file(result['text'], output_file)
        logger.info(f"Output saved to {output_file}")
        failed = failed or bool(result['issues'])
        
    return 1 if failed else 0
