from task_tracker.main import main

raise SystemExit(main())
