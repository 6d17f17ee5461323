from nextsweep.cli import main

raise SystemExit(main())
