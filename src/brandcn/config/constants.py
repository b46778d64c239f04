"""Centralized constants for brandcn."""
#Logo file extension used by both the library and the target directory
LOGO_EXT=".svg"
#Variant suffixes that take part in --dark/--light/--wordmark filtering
VARIANT_SUFFIXES=("_dark","_light","_wordmark")
#Display-only suffixes recognised when grouping the library listing
DISPLAY_SUFFIXES=("_icon","_logo")
#Default target directories relative to the project root
DEFAULT_TARGET_DIR="components/logos"
DEFAULT_SRC_TARGET_DIR="src/components/logos"
#Workspace roots scanned for a configured outputDir
WORKSPACE_ROOTS=("apps","packages")
#package.json key holding brandcn configuration
PACKAGE_JSON_KEY="brandcn"
#Simulated store latency range (ms) in developer mode
DEV_LATENCY_RANGE_MS=(100,300)
class ExitCode:
    SUCCESS=0
    FAILURE=1
    PARTIAL=2
