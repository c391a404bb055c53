#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
AHP Decision Analysis — Main Entry Point
========================================

Usage
-----
    python main.py [--preset supplier_evaluation] [--delta 0.05] [--output result]

Runs one of the preset decision models with sample judgments and scores
through the five-phase pipeline:

1. Weight Derivation    – comparison matrix + consistency ratio
2. Ranking              – weighted sum of alternative scores
3. Sensitivity Analysis – ±delta sweep of every criterion weight
4. Visualisation        – PNG figures
5. Result Export        – CSV / JSON / Markdown report
"""

import argparse
import sys
from pathlib import Path


# Sample inputs per preset: judgments (first, second, intensity) and
# alternatives {name: (data, {criterion: score})}.
DEMO_INPUTS = {
    'sales_forecast': {
        'judgments': [
            ('Demand Accuracy', 'Trend Alignment', 3),
            ('Demand Accuracy', 'Seasonal Fit', 4),
            ('Demand Accuracy', 'Price Competitiveness', 5),
            ('Demand Accuracy', 'Inventory Risk', 2),
            ('Trend Alignment', 'Seasonal Fit', 2),
            ('Trend Alignment', 'Price Competitiveness', 2),
            ('Inventory Risk', 'Trend Alignment', 2),
            ('Seasonal Fit', 'Price Competitiveness', 1),
            ('Inventory Risk', 'Seasonal Fit', 3),
            ('Inventory Risk', 'Price Competitiveness', 3),
        ],
        'alternatives': {
            'Gradient Boosting': ({'horizon': '12w'}, {
                'Demand Accuracy': 86, 'Trend Alignment': 70, 'Seasonal Fit': 78,
                'Price Competitiveness': 65, 'Inventory Risk': 60}),
            'Seasonal Naive': ({'horizon': '12w'}, {
                'Demand Accuracy': 68, 'Trend Alignment': 55, 'Seasonal Fit': 90,
                'Price Competitiveness': 70, 'Inventory Risk': 72}),
            'Trend-Adjusted Ensemble': ({'horizon': '12w'}, {
                'Demand Accuracy': 81, 'Trend Alignment': 88, 'Seasonal Fit': 74,
                'Price Competitiveness': 62, 'Inventory Risk': 58}),
        },
    },
    'product_selection': {
        'judgments': [
            ('Customer Demand', 'Profit Margin', 2),
            ('Customer Demand', 'Supply Chain Risk', 4),
            ('Customer Demand', 'Brand Alignment', 3),
            ('Profit Margin', 'Supply Chain Risk', 3),
            ('Profit Margin', 'Brand Alignment', 2),
            ('Brand Alignment', 'Supply Chain Risk', 1),
        ],
        'alternatives': {
            'Linen Blazer': ({'category': 'outerwear'}, {
                'Customer Demand': 74, 'Profit Margin': 82,
                'Supply Chain Risk': 40, 'Brand Alignment': 88}),
            'Cargo Trousers': ({'category': 'bottoms'}, {
                'Customer Demand': 86, 'Profit Margin': 61,
                'Supply Chain Risk': 55, 'Brand Alignment': 70}),
            'Knit Vest': ({'category': 'knitwear'}, {
                'Customer Demand': 63, 'Profit Margin': 77,
                'Supply Chain Risk': 35, 'Brand Alignment': 80}),
        },
    },
    'supplier_evaluation': {
        'judgments': [
            ('Quality', 'Delivery Time', 3),
            ('Quality', 'Cost', 2),
            ('Quality', 'Sustainability', 5),
            ('Cost', 'Delivery Time', 2),
            ('Delivery Time', 'Sustainability', 2),
            ('Cost', 'Sustainability', 3),
        ],
        'alternatives': {
            'Atelier Nord': ({'country': 'PT'}, {
                'Quality': 92, 'Delivery Time': 70, 'Cost': 55, 'Sustainability': 85}),
            'Silk Route Textiles': ({'country': 'VN'}, {
                'Quality': 78, 'Delivery Time': 82, 'Cost': 80, 'Sustainability': 60}),
            'Coastline Garments': ({'country': 'TR'}, {
                'Quality': 84, 'Delivery Time': 88, 'Cost': 68, 'Sustainability': 72}),
        },
    },
}


def build_demo_model(preset: str, config=None):
    """Create *preset* and fill it with the sample judgments and scores."""
    from mcdm.presets import get_preset

    model = get_preset(preset)(config)
    inputs = DEMO_INPUTS[preset]
    for first, second, intensity in inputs['judgments']:
        model.set_pairwise_comparison(first, second, intensity)
    for name, (data, scores) in inputs['alternatives'].items():
        model.add_alternative(name, data)
        for criterion, score in scores.items():
            model.score_alternative(name, criterion, score)
    return model


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='AHP decision analysis')
    parser.add_argument('--preset', choices=sorted(DEMO_INPUTS),
                        default='supplier_evaluation')
    parser.add_argument('--delta', type=float, default=None,
                        help='maximum weight variation for the sensitivity sweep')
    parser.add_argument('--output', default='result', help='output directory')
    parser.add_argument('--no-figures', action='store_true')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Configure and execute the AHP pipeline."""
    from config import get_default_config, set_config
    from pipeline import AHPPipeline

    args = parse_args(argv)

    config = get_default_config()
    output = Path(args.output)
    config.paths.base_dir = output.parent
    config.paths.output_name = output.name
    config.visualization.enabled = not args.no_figures
    set_config(config)

    model = build_demo_model(args.preset, config)
    pipeline = AHPPipeline(config)

    try:
        result = pipeline.run(model, delta=args.delta)
        pipeline.console.show_model_summary(result)
        pipeline.console.show_completion(config.output_dir)
    except Exception as e:
        print(f"\n  ERROR: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
