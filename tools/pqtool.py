#!/usr/bin/env python3
import argparse, logging, os
from pigquest.config import CONFIG, Difficulty
from pigquest.engine.state import prepare_level
from pigquest.mapgen.generator import compose_level

def write_rows(rows, path):
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        for row in rows:
            f.write(row + '\n')

def cmd_emit(args):
    layout = compose_level(args.level, args.difficulty)
    if args.out:
        write_rows(layout.rows, args.out)
        print(f"Wrote {args.out}")
    else:
        print("\n".join(layout.rows))

def cmd_info(args):
    p = prepare_level(args.level, args.difficulty)
    print(p.layout.caption)
    print(f"difficulty: {p.layout.difficulty}")
    print(f"size:       {p.layout.size}x{p.layout.size}")
    print(f"loops:      {p.layout.loops_added}")
    print(f"shortest:   {p.shortest}")
    print(f"budget:     {p.budget}")

def cmd_golden(args):
    base = os.path.join(args.outdir, args.difficulty.value.lower())
    os.makedirs(base, exist_ok=True)
    for lvl in range(1, args.levels + 1):
        layout = compose_level(lvl, args.difficulty)
        write_rows(layout.rows, os.path.join(base, f"{lvl:02d}.txt"))
    print(f"Wrote golden pack to {base}")

def main(argv=None):
    p = argparse.ArgumentParser(description="Super Pig Quest level tool")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)

    def level_args(sp):
        sp.add_argument('--difficulty', type=Difficulty.parse, required=True)
        sp.add_argument('--level', type=int, required=True)

    p1 = sub.add_parser('emit')
    level_args(p1)
    p1.add_argument('--out', type=str)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('info')
    level_args(p2)
    p2.set_defaults(func=cmd_info)
    p3 = sub.add_parser('golden')
    p3.add_argument('--difficulty', type=Difficulty.parse, required=True)
    p3.add_argument('--outdir', type=str, required=True)
    p3.add_argument('--levels', type=int, default=CONFIG.max_levels)
    p3.set_defaults(func=cmd_golden)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    args.func(args)

if __name__ == '__main__':
    main()
